"""Data Access Object (DAO) implementation for managing shortened URLs in process memory

This module provides an in-memory implementation of ShortURLBaseDAO, safe for
concurrent use from multiple threads without any locking by the caller.

Responsibilities:
    - Insert short URLs with insert-if-absent semantics on the shortcode;
    - Maintain the reverse index (target URL -> shortcode);
    - Count link hits with an atomic, per-record counter.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from shardshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.try_insert(short_url)
    True
    >>> dao.get('A0aaaaab').target
    'https://example.com/page'
    >>> dao.increment_hits('A0aaaaab')
    True
    >>> dao.get('A0aaaaab').hits
    1

NOTE:
    State is lost when the process exits.
"""

import logging
import dataclasses
from dataclasses import dataclass

from beartype import beartype

from shardshortener.models import ShortURLModel
from shardshortener.constants import DefaultConfig
from shardshortener.dao.base import ShortURLBaseDAO
from shardshortener.dao.memory.counters import AtomicCounter
from shardshortener.dao.memory.helpers import StripedTable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    record: ShortURLModel
    hits: AtomicCounter


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    Attributes:
        stripes (int):
            Number of independently locked segments per index.

    Methods:
        try_insert(short_url: ShortURLModel) -> bool:
            Insert a short URL if its shortcode is unused; update the reverse index.

        upsert_reverse_index(target: str, shortcode: str) -> None:
            Set the reverse index entry (last writer wins).

        get(shortcode: str) -> ShortURLModel | None:
            Retrieve a snapshot of a short URL, including its current hit count.

        get_code_for_url(target: str) -> str | None:
            Retrieve the shortcode recorded for a target URL.

        increment_hits(shortcode: str) -> bool:
            Increment a short URL's hit counter without lost updates.
    """

    def __init__(self, stripes: int = DefaultConfig.STORE_STRIPES):
        self.stripes = stripes
        self._records = StripedTable(stripes)
        self._codes = StripedTable(stripes)

    @beartype
    def try_insert(self, short_url: ShortURLModel) -> bool:
        """Insert a short URL mapping if its shortcode is unused

        The forward index check-and-set happens under the shortcode's segment
        lock. The reverse index is written afterwards, so readers may briefly
        miss it, but it never names a shortcode that isn't stored.

        Args:
            short_url (ShortURLModel):
                Record to insert. Its `hits` value seeds the hit counter.

        Returns:
            bool: True if inserted, False if the shortcode already exists.

        Example:
            >>> dao.try_insert(short_url)
            True
        """
        lock, segment = self._records.segment(short_url.shortcode)
        with lock:
            if short_url.shortcode in segment:
                return False
            segment[short_url.shortcode] = _Entry(record=short_url, hits=AtomicCounter(short_url.hits))

        self._codes.set(short_url.target, short_url.shortcode)
        logger.debug('Inserted short URL record.', extra={'shortcode': short_url.shortcode})
        return True

    @beartype
    def upsert_reverse_index(self, target: str, shortcode: str) -> None:
        self._codes.set(target, shortcode)

    @beartype
    def get(self, shortcode: str) -> ShortURLModel | None:
        entry = self._records.get(shortcode)
        if entry is None:
            return None
        return dataclasses.replace(entry.record, hits=entry.hits.value)

    @beartype
    def get_code_for_url(self, target: str) -> str | None:
        return self._codes.get(target)

    @beartype
    def increment_hits(self, shortcode: str) -> bool:
        """Increment the hit counter of a short URL

        Records are never removed, so the counter can be bumped outside the
        segment lock once the entry has been found.

        Returns:
            bool: True if the short URL exists, False otherwise.

        Example:
            >>> dao.increment_hits('A0aaaaab')
            True
            >>> dao.increment_hits('unknown')
            False
        """
        entry = self._records.get(shortcode)
        if entry is None:
            return False
        entry.hits.increment()
        return True

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, shortcode: object) -> bool:
        return isinstance(shortcode, str) and self._records.get(shortcode) is not None
