"""Named operation cycles used for fault aging.

Operation cycles are logical time units (for example "ignition", "drive" or
"power") that govern when faults can be aged out. External lifecycle signals
are delivered by an :class:`OperationCycleProvider` as
:class:`OperationCycleEvent` values, which an :class:`OperationCycleTracker`
consumes to advance its counters.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Iterable, Mapping

_COUNTER_MAX = 2**64 - 1


class CycleSource(Enum):
    """Where an operation-cycle event came from."""

    ECU = auto()
    HPC = auto()
    MANUAL = auto()


class CycleEventType(Enum):
    """What happened with the named operation cycle."""

    START = auto()
    """A new cycle started; the counter is incremented."""
    STOP = auto()
    """The current cycle ended; informational, the counter is unchanged."""
    RESTART = auto()
    """The cycle restarted; counts as a single increment."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OperationCycleEvent:
    """A typed operation-cycle event emitted by a provider."""

    cycle_id: str
    event_type: CycleEventType
    source: CycleSource = CycleSource.MANUAL
    timestamp: datetime = field(default_factory=_now)


class OperationCycleProvider(abc.ABC):
    """Source of operation-cycle events that the fault manager polls."""

    @abc.abstractmethod
    def poll(self) -> list[OperationCycleEvent]:
        """Drain and return all events pending since the last call.

        Must not block; returns an empty list when nothing is pending.
        """

    def _running_totals(self) -> Mapping[str, int] | None:
        """Running cycle totals kept by the provider, or None if it keeps none."""
        return None

    def current_cycle(self, cycle_id: str) -> int | None:
        """Current count for ``cycle_id`` if the provider tracks one."""
        totals = self._running_totals()
        if totals is None:
            return None
        return totals.get(cycle_id)


class OperationCycleTracker:
    """Counts operation cycles by name; unknown cycles count as zero."""

    def __init__(self) -> None:
        self._cycles: dict[str, int] = {}

    def increment(self, cycle_ref: str) -> int:
        """Advance the named counter and return its new value."""
        count = min(self._cycles.get(cycle_ref, 0) + 1, _COUNTER_MAX)
        self._cycles[cycle_ref] = count
        return count

    def get(self, cycle_ref: str) -> int:
        """Return the current count of a cycle, 0 if it was never started."""
        return self._cycles.get(cycle_ref, 0)

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all current counters."""
        return dict(self._cycles)

    def apply_events(self, events: Iterable[OperationCycleEvent]) -> list[str]:
        """Apply a batch of events and return the names that were incremented.

        ``START`` and ``RESTART`` increment the counter; ``STOP`` is
        informational and leaves it unchanged.
        """
        incremented: list[str] = []
        for event in events:
            if event.event_type in (CycleEventType.START, CycleEventType.RESTART):
                self.increment(event.cycle_id)
                incremented.append(event.cycle_id)
        return incremented


class ManualCycleProvider(OperationCycleProvider):
    """Provider backed by an in-memory queue, for tests and manual injection."""

    def __init__(self) -> None:
        self._pending: list[OperationCycleEvent] = []

    def push(self, event: OperationCycleEvent) -> None:
        """Queue an event to be returned by the next :meth:`poll`."""
        self._pending.append(event)

    def start_cycle(self, cycle_id: str) -> None:
        """Queue a ``START`` event for ``cycle_id``."""
        self.push(OperationCycleEvent(cycle_id, CycleEventType.START, CycleSource.MANUAL))

    def stop_cycle(self, cycle_id: str) -> None:
        """Queue a ``STOP`` event for ``cycle_id``."""
        self.push(OperationCycleEvent(cycle_id, CycleEventType.STOP, CycleSource.MANUAL))

    def poll(self) -> list[OperationCycleEvent]:
        events, self._pending = self._pending, []
        return events