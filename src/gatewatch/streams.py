"""Helpers for async streams."""

from typing import AsyncIterator, Callable, Optional, TypeVar

T = TypeVar("T")


async def with_completion(
    source: AsyncIterator[T], on_completion: Optional[Callable[[], None]] = None
) -> AsyncIterator[T]:
    """
    Re-yield source and run on_completion exactly once when iteration stops.

    The hook runs on exhaustion, on an upstream error and when the consumer
    closes the stream early. Errors still propagate after the hook.
    """
    try:
        async for item in source:
            yield item
    finally:
        try:
            await source.aclose()
        finally:
            if on_completion is not None:
                on_completion()
