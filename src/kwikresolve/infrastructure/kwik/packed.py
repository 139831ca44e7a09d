"""Decoder for the positional-numeral packing used on kwik embed pages.

The page ships its player markup as one long string of segments separated
by ``alphabet[base]``. Every segment is a base-N numeral whose last
character is the units digit and whose digits are indices into
``alphabet``. Subtracting ``offset`` from a segment's value yields one
character code.
"""

from __future__ import annotations

from kwikresolve.domain.exceptions import DecodeError

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _segment_value(segment: str, alphabet: str, base: int) -> int:
    """Value of one segment; characters outside the alphabet count as 0."""
    value = 0
    for position, char in enumerate(reversed(segment)):
        digit = alphabet.find(char)
        if digit != -1:
            value += digit * base**position
    return value


def decode_packed(encoded: str, alphabet: str, offset: int, base: int) -> str:
    """Decode a packed string.

    Empty segments (leading, trailing or doubled delimiters) produce
    nothing. Raises DecodeError when ``base`` does not leave room for the
    delimiter inside ``alphabet`` or when a segment does not map to a
    Unicode scalar value (negative, above U+10FFFF, or a surrogate).
    """
    if not 1 <= base < len(alphabet):
        raise DecodeError(
            f"Invalid packing parameters: base {base} "
            f"with alphabet of length {len(alphabet)}"
        )

    delimiter = alphabet[base]
    chars: list[str] = []
    for index, segment in enumerate(encoded.split(delimiter)):
        if not segment:
            continue
        code = _segment_value(segment, alphabet, base) - offset
        if not 0 <= code <= _MAX_CODE_POINT or code in _SURROGATES:
            raise DecodeError(
                f"Segment {index} decodes to invalid character code {code}"
            )
        chars.append(chr(code))
    return "".join(chars)
