from __future__ import annotations

WORD_BITS = 16
WORD_MASK = 0xFFFF
WORD_MAX = 0xFFFF


def word(value: int) -> int:
    return value & WORD_MASK


def is_word(value: int) -> bool:
    return 0 <= value <= WORD_MAX


def get_bits(value: int, high: int, low: int) -> int:
    """Return bits ``high`` down to ``low`` (both inclusive), right-justified.

    Bit 15 is the MSB of a word and bit 0 the LSB.
    """
    mask = (1 << (high + 1 - low)) - 1
    return (value >> low) & mask


def get_bit(value: int, bit: int) -> bool:
    return (value >> bit) & 1 == 1


def sext(value: int, bitlength: int) -> int:
    """Sign-extend the low ``bitlength`` bits of ``value``.

    The field is read as a two's-complement number: with the sign bit clear the
    value is returned unchanged, otherwise ``value - 2**bitlength``.
    """
    field = value & ((1 << bitlength) - 1)
    if field >> (bitlength - 1):
        return field - (1 << bitlength)
    return field
