from attr import attrs, attrib

from .errors import InvalidBitCountError

# A field of up to 16 bits, starting at any of the 8 bit offsets inside a
# byte, always fits in three consecutive bytes. Both directions work on a
# 24-bit window made of those bytes, with bit 0 of the buffer being the most
# significant bit of byte 0.

MAX_BITCOUNT = 16
WINDOW_BITS = 24
WINDOW_MASK = 0xFFFFFF


@attrs(frozen=True)
class Stored:
    """Every byte of the window was inside the buffer."""

    discarded = False


@attrs(frozen=True)
class Truncated:
    """
    Part of the window fell past the end of the buffer. ``lost`` holds the
    byte values that would have been written there, in buffer order.
    """

    lost = attrib(converter=tuple)

    @property
    def discarded(self):
        # zero bits past the end are padding, not information
        return any(self.lost)


STORED = Stored()


def _check_window(startbit, bitcount):
    if startbit < 0:
        raise ValueError("startbit must not be negative")
    if not 1 <= bitcount <= MAX_BITCOUNT:
        raise InvalidBitCountError("bitcount %d is not in [1, %d]"
                                   % (bitcount, MAX_BITCOUNT))


def read_bits(buf, startbit, bitcount):
    """
    Return the unsigned int stored in ``bitcount`` bits of ``buf``,
    starting at bit ``startbit``. Bits past the end of ``buf`` read as zero.
    """
    _check_window(startbit, bitcount)
    startbyte = startbit // 8
    window = 0
    for index in range(startbyte, startbyte + 3):
        window = (window << 8) | (buf[index] if index < len(buf) else 0)
    window = (window << (startbit % 8)) & WINDOW_MASK
    return window >> (WINDOW_BITS - bitcount)


def write_bits(buf, n, startbit, bitcount):
    """
    Store ``n`` in ``bitcount`` bits of the mutable ``buf``, starting at bit
    ``startbit``. Bits of ``buf`` outside the window are left alone.

    :return: ``STORED``, or a ``Truncated`` carrying the bytes that did not
        fit. In-bounds bytes are written in both cases.
    """
    _check_window(startbit, bitcount)
    ones = (1 << bitcount) - 1
    shift = startbit % 8
    value = ((n & ones) << (WINDOW_BITS - bitcount)) >> shift
    mask = (ones << (WINDOW_BITS - bitcount)) >> shift
    keep = ~mask & WINDOW_MASK

    startbyte = startbit // 8
    lost = []
    for offset in range(3):
        index = startbyte + offset
        byteshift = 16 - 8 * offset
        if not (mask >> byteshift) & 0xFF:
            continue
        newbits = (value >> byteshift) & 0xFF
        if index < len(buf):
            buf[index] = (buf[index] & (keep >> byteshift) & 0xFF) | newbits
        else:
            lost.append(newbits)
    if lost:
        return Truncated(lost)
    return STORED
