"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Keep a forward index (shortcode -> record) and a reverse index (target URL -> shortcode).
    - Guarantee at-most-once assignment of a shortcode (insert-if-absent).
    - Count link hits without lost updates.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shardshortener.models import ShortURLModel
        >>> from shardshortener.dao import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="A0aaaaab",
        ...     created_at=now,
        ...     expires_at=now + retention,
        ... )
        >>> dao.try_insert(short_url)
        True
        >>> dao.try_insert(short_url)
        False

        >>> dao.get_code_for_url("https://example.com/blog/article-123")
        'A0aaaaab'
        >>> dao.increment_hits("A0aaaaab")
        True
        >>> dao.get("A0aaaaab").hits
        1
"""

from abc import ABC, abstractmethod

from shardshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        try_insert(short_url: ShortURLModel) -> bool:
            Insert a record only if its shortcode is unused.

        upsert_reverse_index(target: str, shortcode: str) -> None:
            Point a target URL at a shortcode (last writer wins).

        get(shortcode: str) -> ShortURLModel | None:
            Retrieve a record by shortcode.

        get_code_for_url(target: str) -> str | None:
            Retrieve the shortcode last assigned to a target URL.

        increment_hits(shortcode: str) -> bool:
            Atomically increment a record's hit counter.

    Subclassing:
        Datastore-specific implementations must extend this class, implement
        all abstract methods and handle their own synchronization. Callers
        never lock around DAO calls.

    NOTE:
        - Records are never deleted. Expiration is checked by readers.
    """

    @abstractmethod
    def try_insert(self, short_url: ShortURLModel) -> bool:
        """Insert a new record if its shortcode is not taken yet.

        The check-and-set on the shortcode must be atomic: of two concurrent
        inserts with the same shortcode, exactly one succeeds. On success the
        reverse index entry `target -> shortcode` is written as well.

        Args:
            short_url (ShortURLModel):
                The record to be inserted.

        Returns:
            bool: True if inserted, False if the shortcode already exists
                  (nothing is modified in that case).
        """
        pass

    @abstractmethod
    def upsert_reverse_index(self, target: str, shortcode: str) -> None:
        """Unconditionally set the reverse index entry `target -> shortcode`."""
        pass

    @abstractmethod
    def get(self, shortcode: str) -> ShortURLModel | None:
        """Retrieve a record by its shortcode.

        Returns:
            ShortURLModel | None: Snapshot of the record (including the current
                                  hit count), or None if it doesn't exist.
        """
        pass

    @abstractmethod
    def get_code_for_url(self, target: str) -> str | None:
        """Retrieve the shortcode recorded for a target URL, or None."""
        pass

    @abstractmethod
    def increment_hits(self, shortcode: str) -> bool:
        """Atomically increment the hit counter of a record.

        Returns:
            bool: True if the record exists and was incremented, False otherwise.
        """
        pass
