"""Timing helpers backed by loguru."""

import time
from functools import wraps

from loguru import logger


def log_pass_duration(func):
    """
    Decorator that logs how long a synchronization pass took.

    When the wrapped call returns something with a ``copied_count`` the count
    is included in the debug line.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        copied = getattr(result, "copied_count", None)
        if copied is None:
            logger.debug(f"{func.__qualname__} finished in {elapsed:.6f}s")
        else:
            logger.debug(f"{func.__qualname__} copied {copied} file(s) in {elapsed:.6f}s")
        return result
    return wrapper
