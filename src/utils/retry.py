"""Retry utilities with exponential backoff for storage reads"""

import asyncio
import logging
from functools import wraps
from typing import Callable, Optional, Tuple, Type

logger = logging.getLogger(__name__)


def async_retry_with_backoff(
    max_retries: Optional[int] = None,
    initial_delay: Optional[float] = None,
    max_delay: float = 5.0,
    exponential_base: float = 2.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,)
):
    """
    Decorator for retrying async functions with exponential backoff
    
    Args:
        max_retries: Maximum number of retry attempts (defaults to
            settings.STORAGE_READ_RETRIES, read at call time)
        initial_delay: Initial delay in seconds (defaults to
            settings.STORAGE_RETRY_INITIAL_DELAY)
        max_delay: Maximum delay in seconds
        exponential_base: Base for exponential backoff calculation
        exceptions: Tuple of exceptions to catch and retry
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            from src.config import settings

            retries = settings.STORAGE_READ_RETRIES if max_retries is None else max_retries
            delay = settings.STORAGE_RETRY_INITIAL_DELAY if initial_delay is None else initial_delay
            
            for attempt in range(retries + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt == retries:
                        if retries:
                            logger.error(
                                f"{func.__name__} failed after {retries} retries: {e}"
                            )
                        raise
                    
                    logger.warning(
                        f"{func.__name__} failed attempt {attempt + 1}/{retries}: {e}, "
                        f"retrying in {delay:.2f}s"
                    )
                    await asyncio.sleep(delay)
                    delay = min(delay * exponential_base, max_delay)
        
        return wrapper
    return decorator
