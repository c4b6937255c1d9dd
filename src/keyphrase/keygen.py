import os
import random

from twisted.python import log
from zope.interface import implementer

from . import _interfaces
from .codec import DEFAULT_KEY_LENGTH, encode
from .errors import NoSecureRandomError

RECIP_BPF = 2 ** -53  # 53 bits fill a float mantissa


@implementer(_interfaces.IRandomSource)
class SystemRandomSource:
    """Floats drawn from the operating system's entropy pool."""
    secure = True

    def random(self):
        return (int.from_bytes(os.urandom(7), "big") >> 3) * RECIP_BPF


@implementer(_interfaces.IRandomSource)
class InsecureRandomSource:
    """A seedable Mersenne Twister. Never use it for real keys."""
    secure = False

    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def random(self):
        return self._random.random()


def default_random_source(secure_required=False):
    try:
        os.urandom(1)
    except NotImplementedError:
        if secure_required:
            raise NoSecureRandomError()
        log.msg("no OS randomness source, using an insecure generator")
        return InsecureRandomSource()
    return SystemRandomSource()


def random_key(key_length=DEFAULT_KEY_LENGTH, source=None,
               secure_required=False):
    """Return ``key_length`` random bytes drawn from ``source``."""
    if source is None:
        source = default_random_source(secure_required)
    source = _interfaces.IRandomSource(source)
    if secure_required and not getattr(source, "secure", False):
        raise NoSecureRandomError("%r is not a secure source" % (source,))
    return bytes(min(int(source.random() * 256), 255)
                 for _ in range(key_length))


def random_passphrase(key_length=DEFAULT_KEY_LENGTH, dictionary=None,
                      source=None, secure_required=False):
    key = random_key(key_length, source, secure_required)
    return encode(key, dictionary)
