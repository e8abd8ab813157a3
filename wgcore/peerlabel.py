"""Short human-readable labels for peers, derived from their public keys."""

from __future__ import annotations

import base64
from typing import Union

KEY_SIZE = 32

_HEAD = slice(0, 4)
_TAIL = slice(39, 43)


def peer_label(public_key: Union[bytes, bytearray, memoryview]) -> str:
    """Abbreviate a 32-byte public key as ``peer(XXXX…YYYY)``.

    The label shows the first four and the last four significant characters
    of the key's standard base64 encoding.
    """
    key = bytes(public_key)
    if len(key) != KEY_SIZE:
        raise ValueError(f"public key must be {KEY_SIZE} bytes, got {len(key)}")
    encoded = base64.b64encode(key).decode("ascii")
    return f"peer({encoded[_HEAD]}…{encoded[_TAIL]})"