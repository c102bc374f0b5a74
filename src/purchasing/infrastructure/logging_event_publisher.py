"""EventPublisher that writes every event to the application log.

Stands in for a message bus until something downstream consumes the
events.
"""

from __future__ import annotations

import logging

from purchasing.application.event_publisher import EventPublisher
from purchasing.domain.model.events import DomainEvent

logger = logging.getLogger(__name__)


class LoggingEventPublisher(EventPublisher):

    def publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            logger.info("%s purchase_order_id=%s", event.name, event.purchase_order_id)
