# rfid_sim/core/event_bus.py
"""
Event bus for the RFID simulation.
Carries tag registry snapshots into sensors and detection reports out of them.
"""

import logging

logger = logging.getLogger(__name__)

class EventBus:
    """Topic based publish/subscribe between the world and its sensors."""

    def __init__(self):
        """Initialize an empty event bus."""
        self.subscribers = {}
        self.debug_mode = False

    def subscribe(self, topic, callback):
        """Subscribe a callback to a topic."""
        if topic not in self.subscribers:
            self.subscribers[topic] = []
        self.subscribers[topic].append(callback)
        return callback

    def unsubscribe(self, topic, callback):
        """Unsubscribe a callback from a topic."""
        if topic in self.subscribers and callback in self.subscribers[topic]:
            self.subscribers[topic].remove(callback)
            return True
        return False

    def publish(self, topic, data=None, source=None):
        """Publish a message to all subscribers of a topic.

        Subscribers receive the message itself. A subscriber that raises is
        logged and skipped; the remaining subscribers still run.

        Args:
            topic (str): Topic name, e.g. ``robot0/rfid_reader_0``.
            data (any, optional): Message being published.
            source (str, optional): Publisher name, used for debug logging.

        Returns:
            int: Number of subscribers that handled the message.
        """
        if self.debug_mode:
            logger.debug(f"Message published on {topic} from {source or 'unknown'}")

        count = 0
        for callback in list(self.subscribers.get(topic, [])):
            try:
                callback(data)
                count += 1
            except Exception as e:
                logger.error(f"Error in subscriber for {topic}: {e}")
        return count

    def topics(self):
        return [topic for topic, callbacks in self.subscribers.items() if callbacks]

    def clear(self):
        """Remove all subscriptions."""
        self.subscribers = {}

    def enable_debug(self, enabled=True):
        """Enable or disable debug logging for published messages."""
        self.debug_mode = enabled
