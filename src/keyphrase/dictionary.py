import re

from attr import attrs, attrib
from twisted.python import log
from zope.interface import implementer

from . import _interfaces
from .errors import InvalidDictionaryError
from .wordlist import words as default_words

DEFAULT_SEPARATOR = r"[\s]"


def _compile(separator):
    if isinstance(separator, str):
        return re.compile(separator)
    return separator


@attrs(frozen=True, eq=False)
@implementer(_interfaces.IDictionary)
class Dictionary:
    """
    The word list a passphrase is spelled with. Encoding uses
    floor(log2(len(words))) bits of the key per word, so only the first
    power-of-two words are ever produced.

    ``ordered`` must only be set when ``words`` is sorted ascending: lookups
    then use a binary search that silently misses words in an unsorted list.
    """
    words = attrib(converter=tuple)
    ordered = attrib(default=True)
    case_sensitive = attrib(default=False)
    separator = attrib(default=DEFAULT_SEPARATOR, converter=_compile)

    def __attrs_post_init__(self):
        count = len(self.words)
        if count < 2:
            return
        usable = 1 << (count.bit_length() - 1)
        if usable != count:
            log.msg("dictionary has %d words, the last %d can never appear"
                    " in a passphrase" % (count, count - usable))

    @classmethod
    def from_file(cls, path, case_sensitive=False,
                  separator=DEFAULT_SEPARATOR):
        """
        Load a word list with one word per line. Blank lines and lines
        starting with '#' are ignored. The list is searched with a binary
        search if (and only if) it is already sorted.
        """
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip() for line in f]
        words = [w for w in words if w and not w.startswith("#")]
        if not case_sensitive:
            words = [w.lower() for w in words]
        if len(set(words)) != len(words):
            raise InvalidDictionaryError("%s contains duplicate words" % path)
        ordered = words == sorted(words)
        log.msg("loaded %d words from %s (ordered=%s)"
                % (len(words), path, ordered))
        return cls(words, ordered=ordered, case_sensitive=case_sensitive,
                   separator=separator)


DEFAULT_DICTIONARY = Dictionary(default_words, ordered=True,
                                case_sensitive=False, separator=r"[\s,]")
