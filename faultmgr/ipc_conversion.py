"""Conversions into and out of the fixed-size shapes used on the IPC wire.

Strings on the wire have a fixed byte capacity: short strings hold 64 bytes
and long strings 128 bytes of UTF-8. Longer input is truncated at a
character boundary. Environment data carries at most 8 key/value pairs;
further entries are dropped.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

logger = logging.getLogger(__name__)

SHORT_STRING_CAPACITY = 64
LONG_STRING_CAPACITY = 128
ENV_DATA_CAPACITY = 8


def _truncate(text: str, capacity: int, kind: str) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= capacity:
        return text
    # Cutting mid-character leaves an incomplete trailing sequence; drop it.
    result = encoded[:capacity].decode("utf-8", errors="ignore")
    logger.warning(
        "IPC %s truncation: input %d bytes -> %d bytes",
        kind,
        len(encoded),
        len(result.encode("utf-8")),
    )
    return result


def short_str(text: str) -> str:
    """Truncate ``text`` to fit a 64-byte short string."""
    return _truncate(text, SHORT_STRING_CAPACITY, "ShortString")


def long_str(text: str) -> str:
    """Truncate ``text`` to fit a 128-byte long string."""
    return _truncate(text, LONG_STRING_CAPACITY, "LongString")


def env_data_to_ipc(env: Mapping[str, str]) -> list[tuple[str, str]]:
    """Convert environment data to its wire form.

    Keys and values are truncated to short strings; only the first eight
    entries, in the mapping's iteration order, are kept.
    """
    ipc: list[tuple[str, str]] = []
    for key, value in env.items():
        if len(ipc) >= ENV_DATA_CAPACITY:
            break
        ipc.append((short_str(key), short_str(value)))
    return ipc


def ipc_env_data_to_sovd(ipc: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Convert wire-form environment data back to a dictionary."""
    return {str(key): str(value) for key, value in ipc}