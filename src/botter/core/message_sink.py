"""MessageSink interface for outbound message delivery.

The runtime hands every reply to a sink; transports implement it, tests
substitute a buffer.
"""

from abc import ABC, abstractmethod

from botter.core.messages import OutboundMessage


class MessageSink(ABC):
    """Interface for delivering messages to the user (DIP)."""

    @abstractmethod
    async def send(self, message: OutboundMessage) -> bool:
        """Deliver a message.

        Returns:
            True if the message was accepted, False on a soft failure.

        Raises:
            DeliveryError: If the transport failed outright.
        """
        ...


class BufferedMessageSink(MessageSink):
    """Buffers messages for testing or batch delivery."""

    def __init__(self) -> None:
        self.messages: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> bool:
        """Append message to buffer."""
        self.messages.append(message)
        return True

    @property
    def texts(self) -> list[str]:
        return [message.text for message in self.messages]

    def clear(self) -> None:
        """Clear the message buffer."""
        self.messages.clear()
