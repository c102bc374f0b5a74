"""Base class for aggregate roots that record domain events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from purchasing.domain.model.events import DomainEvent


class Aggregate(ABC):
    """Keeps the events recorded during the current unit of work.

    The buffer belongs to the instance.  ``recorded_events()`` hands the
    events over and empties the buffer, so each event reaches the caller
    exactly once.
    """

    def __init__(self) -> None:
        self._recorded_events: list[DomainEvent] = []

    @property
    @abstractmethod
    def id(self) -> object:
        """Identity of the aggregate."""

    def recorded_events(self) -> list[DomainEvent]:
        events, self._recorded_events = self._recorded_events, []
        return events

    def _record_that(self, event: DomainEvent) -> None:
        self._recorded_events.append(event)
