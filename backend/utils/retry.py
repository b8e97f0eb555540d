import asyncio
import logging
from typing import Callable, TypeVar, Any
from functools import wraps

from config.constants import RETRY_CONFIG

logger = logging.getLogger(__name__)

T = TypeVar('T')

def async_retry(
    max_attempts: int = RETRY_CONFIG.MAX_ATTEMPTS,
    base_delay: float = RETRY_CONFIG.BASE_DELAY,
    max_delay: float = RETRY_CONFIG.MAX_DELAY,
    exponential_base: float = 2,
    exceptions: tuple = (Exception,)
):

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            last_exception = None

            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    last_exception = e

                    if attempt == max_attempts - 1:
                        logger.error(
                            f"Function {func.__name__} failed after {max_attempts} attempts: {e}"
                        )
                        raise

                    delay = min(base_delay * (exponential_base ** attempt), max_delay)
                    logger.warning(
                        f"Function {func.__name__} failed (attempt {attempt + 1}/{max_attempts}), "
                        f"retrying in {delay:.2f}s: {e}"
                    )
                    await asyncio.sleep(delay)

            raise last_exception

        return wrapper
    return decorator
