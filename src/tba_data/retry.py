"""
TBA Retry Manager

This module runs a fetch operation with a bounded number of attempts and a
fixed delay between them. Exhausting the attempts yields ``None`` rather than
an exception, so callers must treat ``None`` as "give up".
"""

import logging
import time
from typing import Callable, Optional, TypeVar

from .exceptions import UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class RetryManager:
    """Manages retry logic for failed requests."""

    def __init__(self, max_retries: int = 3, delay_seconds: float = 2.0,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            max_retries: Total number of attempts before giving up
            delay_seconds: Fixed wait between attempts
            sleep: Function used to wait; replace it to make the wait interruptible
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be non-negative")

        self.max_retries = max_retries
        self.delay_seconds = delay_seconds
        self.sleep = sleep

        logger.debug(f"Initialized retry manager: max_retries={max_retries}, "
                     f"delay={delay_seconds}s")

    def execute(self, operation: Callable[[], T]) -> Optional[T]:
        """
        Execute an operation with retry logic.

        Only UpstreamError is retried; validation and configuration errors
        propagate immediately.

        Args:
            operation: Zero-argument function to execute

        Returns:
            The operation's result, or None once every attempt has failed
        """
        for attempt in range(1, self.max_retries + 1):
            try:
                return operation()
            except UpstreamError as e:
                logger.warning(f"Attempt {attempt}/{self.max_retries} failed: {e}")
                if attempt < self.max_retries:
                    self.sleep(self.delay_seconds)

        logger.error(f"All {self.max_retries} attempts failed; giving up")
        return None
