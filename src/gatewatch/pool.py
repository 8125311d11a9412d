"""Bounded worker pool fanning passenger names out and flights back in."""

import asyncio
from typing import Callable, Iterable, List, Optional

from gatewatch.exceptions import PoolFailure
from gatewatch.fetcher import ParallelFetcher
from gatewatch.logger import logger
from gatewatch.models import FlightBoard, FlightStatus

# Marks a queue as closed for sending
_CLOSED = object()


class WorkerPool:
    """
    Fetches many flights with a fixed number of concurrent workers.

    One producer feeds passenger names into a one-slot work queue and then
    closes it. Each worker drains names, fetches the flight and pushes it
    to the result queue. A supervisor closes the result queue once every
    worker has finished, and only then are results collected.
    """

    def __init__(
        self,
        fetcher: ParallelFetcher,
        on_result: Optional[Callable[[FlightStatus], None]] = None,
    ):
        self._fetcher = fetcher
        self._on_result = on_result

    async def fetch_all(
        self, passenger_names: Iterable[str], worker_count: int = 2
    ) -> FlightBoard:
        """
        Fetch a flight for every passenger name.

        The result order follows completion, not input. Any worker failure
        aborts the remaining work and raises PoolFailure; results already
        collected are discarded.
        """
        if worker_count < 1:
            raise ValueError(f"worker_count must be >= 1, got {worker_count}")
        names = list(passenger_names)
        work: asyncio.Queue = asyncio.Queue(maxsize=1)
        results: asyncio.Queue = asyncio.Queue()

        logger.info(f"Fetching {len(names)} flights with {worker_count} workers")
        try:
            async with asyncio.TaskGroup() as tg:
                tg.create_task(self._produce(names, work, worker_count), name="producer")
                workers = [
                    tg.create_task(self._work(i, work, results), name=f"worker-{i}")
                    for i in range(1, worker_count + 1)
                ]
                tg.create_task(self._supervise(workers, results), name="supervisor")
        except ExceptionGroup as eg:
            failure = next((e for e in eg.exceptions if isinstance(e, PoolFailure)), None)
            if failure is not None:
                raise failure
            raise PoolFailure(f"Worker pool failed: {eg.exceptions[0]}") from eg.exceptions[0]

        return FlightBoard(flights=self._drain(results))

    async def _produce(self, names: List[str], work: asyncio.Queue, worker_count: int) -> None:
        for name in names:
            await work.put(name)
        # One end-of-input marker per worker
        for _ in range(worker_count):
            await work.put(_CLOSED)

    async def _work(self, worker_id: int, work: asyncio.Queue, results: asyncio.Queue) -> None:
        while True:
            name = await work.get()
            if name is _CLOSED:
                logger.debug(f"Worker {worker_id} done")
                return
            try:
                flight = await self._fetcher.fetch(name)
            except Exception as e:
                logger.debug(f"Worker {worker_id} failed fetching {name}'s flight: {e}")
                raise PoolFailure(
                    f"Fetching {name}'s flight failed: {e}", passenger_name=name
                ) from e
            logger.info(f"Fetched flight: {flight}")
            if self._on_result is not None:
                self._on_result(flight)
            await results.put(flight)

    async def _supervise(self, workers: List[asyncio.Task], results: asyncio.Queue) -> None:
        await asyncio.wait(workers)
        await results.put(_CLOSED)

    def _drain(self, results: asyncio.Queue) -> List[FlightStatus]:
        flights = []
        while True:
            item = results.get_nowait()
            if item is _CLOSED:
                return flights
            flights.append(item)
