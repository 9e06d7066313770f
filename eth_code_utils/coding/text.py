"""Hex to text decoding for values returned by contract calls."""

import re

# parseInt(s, 16): skip leading whitespace, optional sign, optional 0x prefix,
# then the longest run of hex digits.
_HEX_INT = re.compile(
    "[\\t\\n\\v\\f\\r \\u00a0\\u1680\\u2000-\\u200a\\u2028\\u2029"
    "\\u202f\\u205f\\u3000\\ufeff]*"
    "([+-]?)(?:0[xX])?([0-9a-fA-F]*)"
)


def _parse_hex_int(chunk):
    """Parse ``chunk`` the way JavaScript's ``parseInt(chunk, 16)`` does.

    Returns None where parseInt would give NaN.
    """
    sign, digits = _HEX_INT.match(chunk).groups()
    if not digits:
        return None
    value = int(digits, 16)
    return -value if sign == "-" else value


def hex2a(hex: str) -> str:
    """
    Decode a hex string into text, one character per byte.

    Zero bytes are dropped rather than emitted as NUL, so the padding of
    fixed-size ``bytesN`` values disappears. Pairs that are not valid hex
    produce nothing, and an odd trailing nibble is ignored.

    Args:
        hex: Hex digits, two per character

    Returns:
        Decoded string
    """
    result = ""
    for i in range(0, len(hex) - 1, 2):
        value = _parse_hex_int(hex[i:i + 2])
        if value:
            # String.fromCharCode takes the value modulo 2**16
            result += chr(value & 0xFFFF)
    return result
