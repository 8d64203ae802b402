"""RuntimeLoop: feeds inbound events through the dialogue engine."""

import asyncio
import logging
from collections import Counter
from collections.abc import AsyncIterable, Hashable
from typing import Any

from botter.core.errors import DeliveryError
from botter.core.message_sink import MessageSink
from botter.core.messages import InboundEvent, OutboundMessage, UserId
from botter.dm.engine import DialogueEngine
from botter.observability.logging import ContextLogger
from botter.session.store import SessionStore

logger = logging.getLogger(__name__)
context_logger = ContextLogger(__name__)


class RuntimeLoop:
    """Runtime loop tying the session store, the engine and a message sink together.

    Transitions are applied synchronously under the user's session lock, so
    `handle` may be called from many threads. Delivery happens afterwards and
    a failed send never rolls back the transition that produced it.
    """

    def __init__(
        self,
        store: SessionStore,
        engine: DialogueEngine,
        sink: MessageSink | None = None,
        max_concurrency: int = 8,
    ) -> None:
        self.store = store
        self.engine = engine
        self.sink = sink
        self.max_concurrency = max_concurrency
        self._user_locks: dict[Hashable, asyncio.Lock] = {}
        self._queued: Counter[Hashable] = Counter()

    async def __aenter__(self) -> "RuntimeLoop":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Cleanup."""
        pass

    def handle(self, event: InboundEvent) -> list[OutboundMessage]:
        """Apply one event to its sender's session.

        Events with empty text are ignored without creating a session.

        Returns:
            Outbound messages addressed to the event's chat
        """
        if not event.text:
            return []

        context_logger.with_context(user_id=event.session_key).debug(
            f"Handling event from {event.session_key}"
        )
        with self.store.borrow(event.session_key) as session:
            replies = self.engine.handle(session, event.text)

        return [reply.to(event.chat_target) for reply in replies]

    async def process_message(
        self,
        message: str,
        user_id: UserId | None = None,
        chat_id: UserId | None = None,
    ) -> list[OutboundMessage]:
        """Process a message and deliver the replies through the sink.

        Args:
            message: Text sent by the user
            user_id: Identifier of the sender
            chat_id: Conversation to reply to, defaults to the sender

        Returns:
            The outbound messages produced, whether or not delivery succeeded
        """
        event = InboundEvent(user_id=user_id, chat_id=chat_id, text=message)
        return await self._process(event)

    async def run(self, events: AsyncIterable[InboundEvent]) -> int:
        """Consume an event stream until it is exhausted.

        Events from different users are processed concurrently, up to
        `max_concurrency` at once; events from the same user are processed
        one at a time in arrival order.

        Returns:
            Number of events consumed

        Raises:
            ExceptionGroup: If processing an event fails with an error other
                than a delivery failure. Consumption stops and in-flight
                events are cancelled.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)
        count = 0

        async with asyncio.TaskGroup() as group:
            async for event in events:
                count += 1
                key = event.session_key
                # Acquire the user lock before the semaphore so queued events keep their order
                task = group.create_task(
                    self._process_ordered(event, self._acquire_user(key), semaphore)
                )
                task.add_done_callback(lambda _, key=key: self._release_user(key))

        logger.info(f"Event stream finished after {count} events")
        return count

    def _acquire_user(self, key: Hashable) -> asyncio.Lock:
        user_lock = self._user_locks.get(key)
        if user_lock is None:
            user_lock = self._user_locks[key] = asyncio.Lock()
        self._queued[key] += 1
        return user_lock

    def _release_user(self, key: Hashable) -> None:
        self._queued[key] -= 1
        if self._queued[key] <= 0:
            del self._queued[key]
            del self._user_locks[key]

    async def _process_ordered(
        self,
        event: InboundEvent,
        user_lock: asyncio.Lock,
        semaphore: asyncio.Semaphore,
    ) -> list[OutboundMessage]:
        async with user_lock:
            async with semaphore:
                return await self._process(event)

    async def _process(self, event: InboundEvent) -> list[OutboundMessage]:
        outbound = self.handle(event)
        for message in outbound:
            await self._deliver(message)
        return outbound

    async def _deliver(self, message: OutboundMessage) -> None:
        if self.sink is None:
            return

        try:
            delivered = await self.sink.send(message)
        except DeliveryError as e:
            logger.warning(
                f"Failed to deliver message to {message.chat_target}: {e}",
                extra={"chat_target": message.chat_target},
            )
            return

        if not delivered:
            logger.warning(
                f"Message to {message.chat_target} was not accepted by the sink",
                extra={"chat_target": message.chat_target},
            )
