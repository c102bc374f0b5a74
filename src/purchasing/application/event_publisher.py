"""Port for handing drained domain events to whoever consumes them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from purchasing.domain.model.events import DomainEvent


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, events: list[DomainEvent]) -> None:
        """Deliver events in the order they were recorded."""
