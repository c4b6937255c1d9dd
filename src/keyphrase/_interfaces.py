from zope.interface import Attribute, Interface

# These interfaces describe the collaborators the codec consumes. Passing
# an object that does not declare one of them is a TypeError.


class IDictionary(Interface):
    """An ordered list of unique words used as the passphrase alphabet."""

    words = Attribute("sequence of unique words")
    ordered = Attribute("True if words are sorted ascending")
    case_sensitive = Attribute("True if capitalization distinguishes words")
    separator = Attribute("compiled regex matching word breaks")


class IRandomSource(Interface):
    def random():
        """Return a float uniformly distributed in [0, 1)."""
