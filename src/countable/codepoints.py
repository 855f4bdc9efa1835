from __future__ import annotations

from typing import Iterator, List

HIGH_SURROGATE_MASK = 0xFC00
HIGH_SURROGATE = 0xD800
LOW_SURROGATE = 0xDC00


def iter_code_points(text: str) -> Iterator[int]:
    """
    Yield the code points of text, decoding UTF-16 surrogate pairs.

    A high surrogate immediately followed by a low surrogate becomes a single
    astral code point. Unpaired halves are passed through unchanged, one unit
    each.
    """
    length = len(text)
    index = 0
    while index < length:
        value = ord(text[index])
        index += 1
        if (value & HIGH_SURROGATE_MASK) == HIGH_SURROGATE and index < length:
            extra = ord(text[index])
            if (extra & HIGH_SURROGATE_MASK) == LOW_SURROGATE:
                index += 1
                yield ((value & 0x3FF) << 10) + (extra & 0x3FF) + 0x10000
                continue
        yield value


def decode(text: str) -> List[int]:
    """Return the list of code points in text."""
    return list(iter_code_points(text))


def count_code_points(text: str) -> int:
    """Count code points without materializing the decoded list."""
    return sum(1 for _ in iter_code_points(text))


def to_utf16_units(text: str) -> List[int]:
    """Encode text as UTF-16 code units, splitting astral characters into pairs."""
    units: List[int] = []
    for char in text:
        value = ord(char)
        if value > 0xFFFF:
            value -= 0x10000
            units.append(HIGH_SURROGATE | (value >> 10))
            units.append(LOW_SURROGATE | (value & 0x3FF))
        else:
            units.append(value)
    return units
