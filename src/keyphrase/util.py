import re
from binascii import hexlify, unhexlify

from .errors import HexFormatError

_NOT_HEX = re.compile(r"[^0-9a-fA-F]")


def key_to_hex(key):
    """Return ``key`` as a string of two lower-case hex digits per byte."""
    hexstr = hexlify(bytes(key)).decode("ascii")
    assert isinstance(hexstr, str)
    return hexstr


def key_from_hex(hexstr):
    """
    Return the bytes spelled by ``hexstr``. Upper and lower case digits are
    both accepted. An odd number of digits is completed with a trailing 0.

    :raises HexFormatError: if ``hexstr`` holds anything but hex digits
    """
    bad = _NOT_HEX.search(hexstr)
    if bad:
        raise HexFormatError("%r is not a hex digit" % bad.group())
    if len(hexstr) % 2:
        hexstr += "0"
    b = unhexlify(hexstr.encode("ascii"))
    assert isinstance(b, bytes)
    return b
