"""Observable count of flights still being tracked at the gate."""

import asyncio
from typing import Callable, List, Optional


class GateCounter:
    """
    Shared integer cell that pushes every change to its subscribers.

    Each subscriber gets its own queue, so values arrive in write order
    with none skipped. The cell accepts writes from one task only: the
    first task that calls set() owns it.
    """

    def __init__(self, initial: int):
        self._value = initial
        self._subscribers: List[asyncio.Queue] = []
        self._writer: Optional[asyncio.Task] = None

    @property
    def value(self) -> int:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set(self, value: int) -> None:
        """Overwrite the value and notify every current subscriber."""
        self._claim()
        self._value = value
        for queue in self._subscribers:
            queue.put_nowait(value)

    def decrement(self) -> int:
        self.set(self._value - 1)
        return self._value

    def subscribe(
        self,
        on_completion: Optional[Callable[[], None]] = None,
        inclusive: bool = False,
    ) -> "Subscription":
        """
        Stream the current value and every later change while it stays positive.

        The subscription is registered right away, so no write made after
        this call is missed. With inclusive=True the first non-positive
        value is yielded before the stream stops.
        """
        queue: asyncio.Queue = asyncio.Queue()
        queue.put_nowait(self._value)
        self._subscribers.append(queue)
        return Subscription(self, queue, inclusive, on_completion)

    def _unsubscribe(self, queue: asyncio.Queue) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def _claim(self) -> None:
        try:
            task = asyncio.current_task()
        except RuntimeError:
            task = None
        if task is None:
            return
        if self._writer is None:
            self._writer = task
        elif self._writer is not task:
            raise RuntimeError(
                f"GateCounter is owned by task {self._writer.get_name()!r}, "
                f"refusing write from {task.get_name()!r}"
            )


class Subscription:
    """
    Async iterator over one subscriber's queue.

    Closing it, by reaching a non-positive value or by aclose(), detaches
    the queue and runs on_completion exactly once, even if it was never
    iterated.
    """

    def __init__(
        self,
        counter: GateCounter,
        queue: asyncio.Queue,
        inclusive: bool,
        on_completion: Optional[Callable[[], None]],
    ):
        self._counter = counter
        self._queue = queue
        self._inclusive = inclusive
        self._on_completion = on_completion
        self.closed = False

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> int:
        if self.closed:
            raise StopAsyncIteration
        value = await self._queue.get()
        if value > 0:
            return value
        await self.aclose()
        if self._inclusive:
            return value
        raise StopAsyncIteration

    async def aclose(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._counter._unsubscribe(self._queue)
        if self._on_completion is not None:
            self._on_completion()
