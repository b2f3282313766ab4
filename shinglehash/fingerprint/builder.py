"""Build 256-bit simhash fingerprints from text."""
from __future__ import annotations

from dataclasses import dataclass
from hashlib import sha256
from typing import Any, Dict, Iterator, List

from shinglehash.utils.bits import get_bit

BIT_LENGTH = 256
BYTE_LENGTH = BIT_LENGTH // 8
SHINGLE_SIZE = 2
HEX_DIGITS = frozenset("0123456789abcdef")

__all__ = [
    "BIT_LENGTH",
    "BYTE_LENGTH",
    "SimHash",
    "extract_features",
    "fingerprint",
    "simhash",
]


@dataclass(frozen=True)
class SimHash:
    """A 256-bit fingerprint in raw and hexadecimal form."""

    bytes: bytes
    hex: str

    @classmethod
    def from_bytes(cls, data: bytes) -> "SimHash":
        data = bytes(data)
        if len(data) != BYTE_LENGTH:
            raise ValueError(f"Fingerprint must be {BYTE_LENGTH} bytes, got {len(data)}")
        return cls(bytes=data, hex=data.hex())

    @classmethod
    def from_hex(cls, value: str) -> "SimHash":
        """Parse a 64-character hex string produced by :attr:`hex`."""

        cleaned = value.strip().lower()
        if len(cleaned) != BYTE_LENGTH * 2:
            raise ValueError(f"Fingerprint hex must be {BYTE_LENGTH * 2} characters, got {len(cleaned)}")
        if any(ch not in HEX_DIGITS for ch in cleaned):
            raise ValueError(f"Invalid fingerprint hex '{value}': only 0-9 and a-f are allowed")
        return cls.from_bytes(bytes.fromhex(cleaned))

    def bit(self, index: int) -> int:
        """Return output bit ``index`` (0 is the LSB of byte 0)."""

        if not 0 <= index < BIT_LENGTH:
            raise IndexError(f"Bit index {index} outside [0, {BIT_LENGTH})")
        return get_bit(index, self.bytes)

    def to_dict(self) -> Dict[str, Any]:
        return {"hex": self.hex, "length": len(self.bytes)}


def extract_features(text: str) -> Iterator[str]:
    """Yield overlapping two-character shingles of ``text``."""

    for index in range(len(text) - SHINGLE_SIZE + 1):
        yield text[index : index + SHINGLE_SIZE]


def simhash(text: str) -> SimHash:
    """Return the simhash fingerprint of ``text``.

    Every shingle is hashed with SHA-256 and votes +1/-1 on each of the 256
    output bits. A bit is set only when its ballot is strictly positive, so an
    empty or single-character input produces 32 zero bytes.
    """

    if not isinstance(text, str):
        raise TypeError(f"simhash() expects str, got {type(text).__name__}")

    ballots: List[int] = [0] * BIT_LENGTH
    for feature in extract_features(text):
        digest = int.from_bytes(sha256(_utf8(feature)).digest(), "little")
        for bit_index in range(BIT_LENGTH):
            if (digest >> bit_index) & 1:
                ballots[bit_index] += 1
            else:
                ballots[bit_index] -= 1

    value = 0
    for bit_index, ballot in enumerate(ballots):
        if ballot > 0:
            value |= 1 << bit_index
    return SimHash.from_bytes(value.to_bytes(BYTE_LENGTH, "little"))


fingerprint = simhash


def _utf8(feature: str) -> bytes:
    if not any("\ud800" <= ch <= "\udfff" for ch in feature):
        return feature.encode("utf-8")
    # Join surrogate pairs and replace lone surrogates with U+FFFD, as TextEncoder does.
    chars: List[str] = []
    index = 0
    while index < len(feature):
        high = feature[index]
        low = feature[index + 1] if index + 1 < len(feature) else ""
        if "\ud800" <= high <= "\udbff" and "\udc00" <= low <= "\udfff":
            chars.append(chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00)))
            index += 2
            continue
        chars.append("\ufffd" if "\ud800" <= high <= "\udfff" else high)
        index += 1
    return "".join(chars).encode("utf-8")
