"""
Helpers for optional sub-calls and progressively looser query chains.
"""
import logging
from typing import Any, Awaitable, Callable, List, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Strategy = Tuple[str, Callable[[], Awaitable[List[Any]]]]


async def best_effort(call: Awaitable[T], default: T, what: str) -> T:
    """
    Await a non-essential call, returning `default` if it fails.

    Failures are logged and never propagated; essential calls are awaited
    directly instead.
    """
    try:
        return await call
    except Exception as e:
        logger.warning(f"{what} failed, continuing without it: {e}")
        return default


async def first_non_empty(strategies: Sequence[Strategy]) -> List[Any]:
    """
    Run named query strategies in order until one returns a non-empty list.

    A strategy that raises is logged and skipped. Returns [] when every
    strategy fails or comes back empty.
    """
    for name, run in strategies:
        try:
            result = await run()
        except Exception as e:
            logger.info(f"Strategy '{name}' failed: {e}")
            continue
        if result:
            logger.debug(f"Strategy '{name}' returned {len(result)} records")
            return result
        logger.info(f"Strategy '{name}' returned nothing, trying next")
    return []
