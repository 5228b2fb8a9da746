import threading


class AtomicCounter:
    """Non-negative integer counter with an indivisible increment.

    The counter is owned by the DAO; callers only ever see its value.
    """

    def __init__(self, initial: int = 0):
        if initial < 0:
            raise ValueError(f'Counter must start at a non-negative value (given value: {initial}).')
        self._value = initial
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
