import asyncio
from typing import Any, Awaitable, Callable, Coroutine, Optional, TypeVar

from utils.logger_utils import get_logger

logger = get_logger("Async Utils")

T = TypeVar("T")


async def gather_with_concurrency(n: int, *tasks: Coroutine[Any, Any, Any]) -> list[Any]:
    """
    Runs the tasks concurrently while keeping at most n of them in flight.
    """
    semaphore = asyncio.Semaphore(n)

    async def sem_task(task: Coroutine[Any, Any, Any]) -> Any:
        async with semaphore:
            return await task

    return await asyncio.gather(*(sem_task(task) for task in tasks))


async def with_timeout_or_default(
    awaitable: Awaitable[T],
    timeout: Optional[float],
    on_error: Callable[[BaseException], T],
    label: Optional[str] = None,
) -> T:
    """
    Awaits `awaitable` for at most `timeout` seconds.
    A timeout or any other failure is turned into `on_error(exc)` instead of propagating.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.warning(f"{label or 'Task'} timed out after {timeout}s")
        return on_error(e)
    except Exception as e:
        logger.warning(f"{label or 'Task'} failed: {e}")
        return on_error(e)
