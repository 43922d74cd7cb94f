"""Conversion between fault identifiers and their textual fault codes.

A fault identifier is one of:

* an ``int`` for a numeric id (32-bit), written as ``0x`` plus upper-case hex;
* ``bytes`` of length 16 for a UUID, written in 8-4-4-4-12 lower-case hex;
* a ``str`` for a text id, written as itself.
"""

from __future__ import annotations

import re
from typing import Union

from faultmgr.errors import BadArgumentError

FaultId = Union[int, bytes, str]

_U32_MAX = 0xFFFF_FFFF
_TEXT_ID_CAPACITY = 64
_UUID_CODE_LENGTH = 36

_HEX_NUMBER = re.compile(r"\+?[0-9A-Fa-f]+")
_HEX_BYTE = re.compile(r"\+?[0-9A-Fa-f]{1,2}")


def fault_id_to_code(fault_id: FaultId) -> str:
    """Return the fault code for a fault identifier."""
    if isinstance(fault_id, bool):
        raise TypeError("a fault id cannot be a bool")
    if isinstance(fault_id, int):
        return f"0x{fault_id:X}"
    if isinstance(fault_id, (bytes, bytearray)):
        if len(fault_id) != 16:
            raise ValueError(f"a UUID fault id has 16 bytes, got {len(fault_id)}")
        h = bytes(fault_id).hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"
    if isinstance(fault_id, str):
        return fault_id
    raise TypeError(f"unsupported fault id type: {type(fault_id).__name__}")


def parse_uuid_string(text: str) -> bytes | None:
    """Parse an 8-4-4-4-12 hex UUID into 16 bytes, or return ``None``."""
    digits = text.replace("-", "").encode("utf-8")
    if len(digits) != 32:
        return None
    result = bytearray()
    for start in range(0, 32, 2):
        pair = digits[start : start + 2]
        try:
            pair_text = pair.decode("ascii")
        except UnicodeDecodeError:
            return None
        if not _HEX_BYTE.fullmatch(pair_text):
            return None
        result.append(int(pair_text, 16))
    return bytes(result)


def fault_id_from_code(fault_code: str) -> FaultId:
    """Parse a fault code back into a fault identifier.

    ``0x``/``0X`` codes are numeric; 36-character codes with four dashes
    that hold valid hex are UUIDs; anything else is a text id.

    Raises :class:`BadArgumentError` for invalid hex after a ``0x`` prefix,
    values beyond 32 bits, and text ids longer than 64 bytes.
    """
    for prefix in ("0x", "0X"):
        if fault_code.startswith(prefix):
            digits = fault_code[len(prefix) :]
            if not _HEX_NUMBER.fullmatch(digits):
                raise BadArgumentError()
            value = int(digits, 16)
            if value > _U32_MAX:
                raise BadArgumentError()
            return value

    encoded = fault_code.encode("utf-8")
    if len(encoded) == _UUID_CODE_LENGTH and encoded.count(b"-") == 4:
        uuid_bytes = parse_uuid_string(fault_code)
        if uuid_bytes is not None:
            return uuid_bytes

    if len(encoded) > _TEXT_ID_CAPACITY:
        raise BadArgumentError()
    return fault_code