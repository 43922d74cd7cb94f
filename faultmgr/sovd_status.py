"""Fault status and fault records as the query API returns them.

The status follows ISO 14229 DTC status byte semantics. Each flag is
optional, and :meth:`SovdFaultStatus.compute_mask` packs the flags into the
status byte.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

# (attribute, wire name, status byte bit) in ISO 14229 bit order.
_STATUS_BITS: tuple[tuple[str, str, int], ...] = (
    ("test_failed", "testFailed", 0x01),
    ("test_failed_this_operation_cycle", "testFailedThisOperationCycle", 0x02),
    ("pending_dtc", "pendingDTC", 0x04),
    ("confirmed_dtc", "confirmedDTC", 0x08),
    ("test_not_completed_since_last_clear", "testNotCompletedSinceLastClear", 0x10),
    ("test_failed_since_last_clear", "testFailedSinceLastClear", 0x20),
    (
        "test_not_completed_this_operation_cycle",
        "testNotCompletedThisOperationCycle",
        0x40,
    ),
    ("warning_indicator_requested", "warningIndicatorRequested", 0x80),
)


def format_mask(mask: int) -> str:
    """Format a status byte as ``0xNN`` with upper-case hex digits."""
    return f"0x{mask:02X}"


@dataclass
class SovdFaultStatus:
    """DTC status flags of a fault; ``None`` means the flag is not reported."""

    test_failed: bool | None = None
    test_failed_this_operation_cycle: bool | None = None
    pending_dtc: bool | None = None
    confirmed_dtc: bool | None = None
    test_not_completed_since_last_clear: bool | None = None
    test_failed_since_last_clear: bool | None = None
    test_not_completed_this_operation_cycle: bool | None = None
    warning_indicator_requested: bool | None = None
    mask: str | None = None

    @classmethod
    def from_state(cls, state: Any) -> SovdFaultStatus:
        """Build a fully populated status from a stored fault state.

        ``state`` must carry the eight flags as boolean attributes. The
        ``mask`` field is filled in from them.
        """
        status = cls(
            **{name: bool(getattr(state, name)) for name, _, _ in _STATUS_BITS}
        )
        status.mask = format_mask(status.compute_mask())
        return status

    def compute_mask(self) -> int:
        """Return the ISO 14229 status byte; unset flags count as false."""
        mask = 0
        for name, _, bit in _STATUS_BITS:
            if getattr(self, name):
                mask |= bit
        return mask

    def to_hash_map(self) -> dict[str, str]:
        """Return the reported flags keyed by wire name, as ``"0"``/``"1"``.

        Flags that are ``None`` are left out; ``mask`` is included when set.
        """
        result = {
            wire: str(int(value))
            for name, wire, _ in _STATUS_BITS
            if (value := getattr(self, name)) is not None
        }
        if self.mask is not None:
            result["mask"] = self.mask
        return result


@dataclass
class SovdFault:
    """A fault as reported to diagnostic tools.

    ``status`` is the wire view of the flags; when ``typed_status`` is set it
    is the authoritative source and ``status`` is derived from it.
    """

    code: str = ""
    display_code: str = ""
    scope: str = ""
    fault_name: str = ""
    fault_translation_id: str = ""
    severity: int = 0
    status: dict[str, str] = field(default_factory=dict)
    symptom: str | None = None
    symptom_translation_id: str | None = None
    schema: str | None = None
    typed_status: SovdFaultStatus | None = None
    occurrence_counter: int | None = None
    aging_counter: int | None = None
    healing_counter: int | None = None
    first_occurrence: str | None = None
    last_occurrence: str | None = None


STATUS_FLAG_NAMES: tuple[str, ...] = tuple(
    f.name for f in fields(SovdFaultStatus) if f.name != "mask"
)