"""
Join combinators for concurrent outbound requests

gather_all_or_nothing: any member failure fails the whole group
gather_all_settled:    member failures degrade to a fallback value
"""

import asyncio
import logging
from typing import Any, Awaitable, Iterable, List, Optional

logger = logging.getLogger(__name__)


async def gather_all_or_nothing(*aws: Awaitable[Any]) -> List[Any]:
    """
    Await all members concurrently and fail if any of them failed

    Every member runs to completion before the outcome is decided, so the
    error raised is always the first failure in positional order.

    Returns:
        Results in the order the awaitables were given

    Raises:
        The first member exception, by position
    """
    results = await asyncio.gather(*aws, return_exceptions=True)

    for result in results:
        if isinstance(result, BaseException):
            raise result

    return list(results)


async def gather_all_settled(
    aws: Iterable[Awaitable[Any]],
    fallback: Optional[Any] = None
) -> List[Any]:
    """
    Await all members concurrently; a failed member resolves to `fallback`

    Args:
        aws: Awaitables to run
        fallback: Value substituted for every failed member

    Returns:
        One entry per awaitable, in order
    """
    results = await asyncio.gather(*aws, return_exceptions=True)

    settled = []
    for index, result in enumerate(results):
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
        if isinstance(result, Exception):
            logger.warning(f"Concurrent task {index} failed, using fallback: {result}")
            settled.append(fallback)
        else:
            settled.append(result)

    return settled
