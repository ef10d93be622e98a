"""Unique, time-ordered resource identifiers."""

from __future__ import annotations

import secrets
import time
from datetime import datetime, timedelta, timezone

BRIDGE = "br"
CHANNEL = "ch"
PLAYBACK = "pb"
RECORDING = "rc"
SNOOP = "sn"

_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_DECODE = {c: i for i, c in enumerate(_ALPHABET)}
_DECODE.update({c.lower(): i for c, i in list(_DECODE.items())})
_ULID_LEN = 26
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _encode_ulid(ms: int, entropy: bytes) -> str:
    value = (ms << 80) | int.from_bytes(entropy, "big")
    chars = []
    for _ in range(_ULID_LEN):
        chars.append(_ALPHABET[value & 0x1F])
        value >>= 5
    return "".join(reversed(chars))


def _decode_ulid(text: str) -> int:
    if len(text) != _ULID_LEN:
        raise ValueError("ulid: bad data size when unmarshaling")
    value = 0
    for ch in text:
        digit = _DECODE.get(ch)
        if digit is None:
            raise ValueError("ulid: bad data characters when unmarshaling")
        value = (value << 5) | digit
    if value >> 128:
        raise ValueError("ulid: overflow when unmarshaling")
    return value


def new(kind: str) -> str:
    """Return a new lower-case ULID, suffixed with ``-<kind>`` (at most two characters)."""
    ms = time.time_ns() // 1_000_000
    rid = _encode_ulid(ms, secrets.token_bytes(10)).lower()
    if kind:
        rid += "-" + kind[:2]
    return rid


def timestamp(id: str) -> datetime:
    """Return the creation time stored in a resource id, as an aware UTC datetime."""
    idx = id.find("-")
    if idx > 0:
        id = id[:idx]
    ms = _decode_ulid(id) >> 80
    return _EPOCH + timedelta(milliseconds=ms)