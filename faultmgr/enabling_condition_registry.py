"""Registry of enabling conditions and their current statuses.

The fault manager tracks every enabling condition it has heard of. When a
status changes, the caller is told so that it can broadcast the change to
all subscribed reporters.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


class EnablingConditionStatus(Enum):
    """Whether an enabling condition is currently fulfilled."""

    INACTIVE = "inactive"
    ACTIVE = "active"


class EnablingConditionRegistry:
    """Enabling conditions keyed by entity name, each with its current status."""

    def __init__(self) -> None:
        self._conditions: dict[str, EnablingConditionStatus] = {}

    def register(self, entity: str) -> EnablingConditionStatus:
        """Register ``entity`` and return its status.

        New conditions start as ``INACTIVE``. Registering a known condition
        again leaves it untouched and returns its current status.
        """
        current = self._conditions.get(entity)
        if current is not None:
            logger.warning(
                "Enabling condition '%s' already registered, current status: %s",
                entity,
                current,
            )
            return current
        status = EnablingConditionStatus.INACTIVE
        self._conditions[entity] = status
        logger.info("Registered enabling condition: %s", entity)
        return status

    def update_status(
        self, entity: str, status: EnablingConditionStatus
    ) -> EnablingConditionStatus | None:
        """Set the status of ``entity``.

        Returns the new status if it changed, ``None`` if it was already set.
        An unknown condition is registered with the given status.
        """
        current = self._conditions.get(entity)
        if current is None:
            self._conditions[entity] = status
            logger.info(
                "Auto-registered enabling condition '%s' with status %s", entity, status
            )
            return status
        if current == status:
            logger.debug("Enabling condition '%s' status unchanged: %s", entity, status)
            return None
        self._conditions[entity] = status
        logger.info("Enabling condition '%s' status changed to %s", entity, status)
        return status

    def get_status(self, entity: str) -> EnablingConditionStatus | None:
        """Return the status of ``entity``, or ``None`` if it is unknown."""
        return self._conditions.get(entity)

    def all_conditions(self) -> Mapping[str, EnablingConditionStatus]:
        """Return a read-only view of all conditions and their statuses."""
        return MappingProxyType(self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)