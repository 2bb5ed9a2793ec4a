# users_api/utils/deadline.py
import time
from typing import Callable


class Deadline:
    """
    Budzet czasu jednego requestu.
    Przekazywany jawnie do kazdego wywolania warstwy danych.
    """

    def __init__(self, timeout: float, clock: Callable[[], float] = time.monotonic):
        self.timeout = timeout
        self._clock = clock
        self.expires_at = clock() + timeout

    def remaining(self) -> float:
        return max(0.0, self.expires_at - self._clock())

    def expired(self) -> bool:
        return self.remaining() <= 0

    def __repr__(self) -> str:
        return f"Deadline(timeout={self.timeout}, remaining={self.remaining():.3f})"
