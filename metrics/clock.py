"""Wall clock helpers for sample timestamps"""
import time
from typing import Callable, Optional
from .errors import ClockError


def current_timestamp_millis(clock: Optional[Callable[[], int]] = None) -> int:
    """Milliseconds since the Unix epoch, read from a nanosecond clock"""
    reading = (clock or time.time_ns)()
    if reading < 0:
        raise ClockError(reading)
    return reading // 1_000_000
