"""
Push-based async streams.

A ``PushStream`` runs a single producer coroutine in its own task and hands
every emitted item to one consumer through an unbounded queue, so a slow
consumer never causes items to be dropped and never blocks the producer.

Example:
    async def produce(emit):
        for page in pages:
            for item in page:
                emit(item)

    async for item in PushStream(produce):
        ...
"""

import asyncio
from typing import AsyncIterator, Awaitable, Callable, List, Optional, TypeVar

T = TypeVar("T")

Emit = Callable[[T], None]
Producer = Callable[[Emit], Awaitable[None]]

_COMPLETE = object()


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException):
        self.error = error


class PushStream(AsyncIterator[T]):
    """
    Unicast async stream fed by one producer coroutine.

    The producer receives an ``emit`` callable. Returning normally completes the
    stream; raising fails it, and the exception is re-raised to the consumer
    after every item emitted before it. The producer starts on first iteration.
    """

    def __init__(self, producer: Producer):
        self._producer = producer
        self._queue: "asyncio.Queue[object]" = asyncio.Queue()
        self._task: Optional[asyncio.Task] = None
        self._subscribed = False
        self._terminated = False
        self._finished = False

    def _emit(self, item: T) -> None:
        if self._terminated:
            raise RuntimeError("Cannot emit into a terminated stream")
        self._queue.put_nowait(item)

    async def _run(self) -> None:
        try:
            await self._producer(self._emit)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._terminated = True
            self._queue.put_nowait(_Failure(e))
        else:
            self._terminated = True
            self._queue.put_nowait(_COMPLETE)

    def __aiter__(self) -> "PushStream[T]":
        if self._subscribed:
            raise RuntimeError("PushStream allows only a single subscriber")
        self._subscribed = True
        return self

    async def __anext__(self) -> T:
        if self._finished:
            raise StopAsyncIteration
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run())

        item = await self._queue.get()
        if item is _COMPLETE:
            self._finished = True
            raise StopAsyncIteration
        if isinstance(item, _Failure):
            self._finished = True
            raise item.error
        return item  # type: ignore[return-value]

    async def aclose(self) -> None:
        """Stop consuming; cancels the producer if it is still running."""
        self._finished = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

    async def to_list(self) -> List[T]:
        """Drain the stream into a list."""
        return [item async for item in self]
