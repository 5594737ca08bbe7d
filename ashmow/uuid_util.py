"""Sixteen-byte identifiers used to tell event types apart."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

_TEXT_LENGTH = 36
_BYTE_OFFSETS = (0, 2, 4, 6, 9, 11, 14, 16, 19, 21, 24, 26, 28, 30, 32, 34)
_GROUP_ENDS = (4, 6, 8, 10, 16)


def _hex_value(ch: str) -> int:
    """Value of one hex digit; anything that is not a hex digit counts as 0."""
    if ch in "0123456789abcdefABCDEF":
        return int(ch, 16)
    return 0


@dataclass(frozen=True)
class Uuid:
    """A 16-byte identifier printed as 8-4-4-4-12 lower-case hex."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 16:
            raise ValueError("a Uuid holds exactly 16 bytes")

    @classmethod
    def random(cls) -> Uuid:
        return cls(secrets.token_bytes(16))

    @classmethod
    def from_string(cls, text: str) -> Uuid:
        """Read the 8-4-4-4-12 form; non-hex digits read as zero."""
        if len(text) < _TEXT_LENGTH:
            raise ValueError(f"uuid text must be {_TEXT_LENGTH} characters: {text!r}")
        return cls(
            bytes(
                _hex_value(text[offset]) * 16 + _hex_value(text[offset + 1])
                for offset in _BYTE_OFFSETS
            )
        )

    def __str__(self) -> str:
        groups = []
        start = 0
        for end in _GROUP_ENDS:
            groups.append(self.data[start:end].hex())
            start = end
        return "-".join(groups)