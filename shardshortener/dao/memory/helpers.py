import threading
from typing import Any

import xxhash


__all__ = ['StripedTable']


class StripedTable:
    """Dictionary split into independently locked segments.

    A key always maps to the same segment (xxh64 of the key modulo the
    segment count), so operations on one key serialize on one lock while
    operations on unrelated keys rarely contend.

    Example:
        >>> table = StripedTable(stripes=4)
        >>> lock, segment = table.segment('A0aaaaab')
        >>> with lock:
        ...     segment.setdefault('A0aaaaab', 'value')
        'value'
    """

    def __init__(self, stripes: int):
        if not isinstance(stripes, int) or isinstance(stripes, bool):
            raise TypeError(f'Stripes must be of type integer (given type: {type(stripes)}).')
        if stripes < 1:
            raise ValueError(f'Stripes must be a positive integer (given value: {stripes}).')

        self._segments = [(threading.Lock(), {}) for _ in range(stripes)]

    def segment(self, key: str) -> tuple[threading.Lock, dict[str, Any]]:
        return self._segments[xxhash.xxh64_intdigest(key) % len(self._segments)]

    def get(self, key: str) -> Any | None:
        lock, segment = self.segment(key)
        with lock:
            return segment.get(key)

    def set(self, key: str, value: Any) -> None:
        lock, segment = self.segment(key)
        with lock:
            segment[key] = value

    def __len__(self) -> int:
        total = 0
        for lock, segment in self._segments:
            with lock:
                total += len(segment)
        return total
