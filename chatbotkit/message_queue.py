"""Waiting for sent messages to be confirmed by the server."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any


class MessageSendError(Exception):
    """The server reported that a message could not be sent."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"error {code}: {message}")
        self.code = code
        self.message = message


class MessageQueue:
    """Pending messages, keyed by their temporary id, until they are sent or fail."""

    def __init__(self) -> None:
        self._queue: dict[int, asyncio.Future[Any]] = {}

    async def wait_for_message(self, message_id: int) -> Any:
        """Wait for one message; raises ``MessageSendError`` if sending failed."""
        (result,) = await self.wait_for_messages([message_id])
        if isinstance(result, MessageSendError):
            raise result
        return result

    async def wait_for_messages(self, message_ids: Iterable[int]) -> list[Any]:
        """Wait for several messages.

        Each item of the result is the sent message, or the ``MessageSendError``
        that sending it ended with.
        """
        loop = asyncio.get_running_loop()
        waiters: list[tuple[int, asyncio.Future[Any]]] = []
        for message_id in message_ids:
            future = loop.create_future()
            self._queue[message_id] = future
            waiters.append((message_id, future))

        results = []
        try:
            for _, future in waiters:
                try:
                    results.append(await future)
                except MessageSendError as error:
                    results.append(error)
        finally:
            for message_id, future in waiters:
                if self._queue.get(message_id) is future:
                    del self._queue[message_id]
        return results

    def message_sent(
        self, old_message_id: int, message: Any = None, error: MessageSendError | None = None
    ) -> None:
        """Report the outcome for the message that had the temporary ``old_message_id``."""
        future = self._queue.pop(old_message_id, None)
        if future is None or future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(message)