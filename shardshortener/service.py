"""Shortening orchestrator

The service ties the shortcode generator and the short URL DAO together and
exposes the three operations callers (e.g. an HTTP layer) use:

    shorten(target, base_domain) -> ShortenResult
    resolve(shortcode) -> str
    stats(shortcode) -> ShortURLStats

A ShortenerService holds no state of its own. The generator and the DAO are
long-lived objects created once per process; a service is cheap to construct
per request around them.

Example:
    >>> from shardshortener.dao import ShortURLMemoryDAO
    >>> from shardshortener.utils.generator import ShardedCodeGenerator
    >>> from shardshortener.service import ShortenerService

    >>> generator = ShardedCodeGenerator('A0')
    >>> dao = ShortURLMemoryDAO()
    >>> service = ShortenerService(generator, dao)
    >>> service.shorten('http://example.com', 'https://sho.rt').short_url
    'https://sho.rt/A0aaaaab'
    >>> service.resolve('A0aaaaab')
    'http://example.com'
    >>> service.stats('A0aaaaab').hits
    1
"""

import logging

from shardshortener.models import ShortURLModel, ShortenResult, ShortURLStats
from shardshortener.constants import ShortCode, Retention, Event
from shardshortener.dao.base import ShortURLBaseDAO
from shardshortener.exceptions import GenerationExhaustedError, ShortURLNotFoundError
from shardshortener.utils.generator import ShardedCodeGenerator
from shardshortener.utils.helpers import get_short_url, utcnow, add_years


logger = logging.getLogger(__name__)


class ShortenerService:
    """Coordinate shortcode generation, storage and lookups.

    Attributes:
        generator (ShardedCodeGenerator):
            Shared, process-wide shortcode generator.
        dao (ShortURLBaseDAO):
            Shared, process-wide short URL store.
    """

    def __init__(self, generator: ShardedCodeGenerator, dao: ShortURLBaseDAO):
        self.generator = generator
        self.dao = dao

    def shorten(self, target: str, base_domain: str) -> ShortenResult:
        """Shorten a URL, reusing an existing shortcode for the same URL

        This method follows this procedure:
        - Step 1: Look up the reverse index for an existing shortcode
        - Step 2: Generate a new shortcode and try to insert the record (bounded retries)
        - Step 3: Give up with GenerationExhaustedError once all attempts collided

        NOTE: the whole procedure isn't atomic. Two concurrent requests for the
              same URL may each get a distinct, valid shortcode.

        Args:
            target (str):
                Original long URL.
            base_domain (str):
                Scheme and host the short URL is served from, e.g. 'https://sho.rt'.

        Returns:
            ShortenResult: shortcode, full short URL and expiry.

        Raises:
            GenerationExhaustedError:
                If every generated shortcode collided with an existing one.
        """
        # 1- Idempotency check
        existing_code = self.dao.get_code_for_url(target)
        if existing_code:
            existing = self.dao.get(existing_code)
            if existing is not None:
                logger.debug('Reusing existing short URL.', extra={'shortcode': existing_code, 'event': Event.SHORT_URL_REUSED})
                return ShortenResult(
                    shortcode=existing_code,
                    short_url=get_short_url(existing_code, base_domain),
                    expires_at=existing.expires_at,
                )
            logger.warning(
                'Reverse index names a missing short URL record. Generating a new shortcode.',
                extra={'shortcode': existing_code, 'event': Event.DANGLING_REVERSE_INDEX},
            )

        # 2- Generate a shortcode and insert the record, retrying on collisions
        for attempt in range(1, ShortCode.MAX_GENERATION_ATTEMPTS + 1):
            shortcode = self.generator.generate_code(ShortCode.LENGTH)
            created_at = utcnow()
            short_url = ShortURLModel(
                target=target,
                shortcode=shortcode,
                created_at=created_at,
                expires_at=add_years(created_at, Retention.YEARS),
            )

            if self.dao.try_insert(short_url):
                # try_insert() already writes the reverse index; keep it explicit for other DAOs
                self.dao.upsert_reverse_index(target, shortcode)
                logger.info('Created short URL.', extra={'shortcode': shortcode, 'attempt': attempt, 'event': Event.SHORT_URL_CREATED})
                return ShortenResult(
                    shortcode=shortcode,
                    short_url=get_short_url(shortcode, base_domain),
                    expires_at=short_url.expires_at,
                )

            logger.warning('Shortcode collision. Retrying.', extra={'shortcode': shortcode, 'attempt': attempt, 'event': Event.SHORTCODE_COLLISION})

        # 3- Every attempt collided
        logger.error(
            'Failed to generate a unique shortcode.',
            extra={'attempts': ShortCode.MAX_GENERATION_ATTEMPTS, 'event': Event.GENERATION_EXHAUSTED},
        )
        raise GenerationExhaustedError(
            f'Failed to generate a unique shortcode after {ShortCode.MAX_GENERATION_ATTEMPTS} attempts. Please retry.'
        )

    def resolve(self, shortcode: str) -> str:
        """Resolve a shortcode to its target URL and count the hit

        Expired short URLs are reported exactly like missing ones.

        Raises:
            ShortURLNotFoundError:
                If the shortcode doesn't exist or has expired.
        """
        short_url = self.dao.get(shortcode)
        if short_url is None:
            logger.info('Short URL not found.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_NOT_FOUND})
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        if utcnow() > short_url.expires_at:
            logger.info('Short URL expired.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_EXPIRED})
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        # Best effort: a missed hit never blocks the redirect
        if not self.dao.increment_hits(shortcode):
            logger.warning('Failed to record hit for short URL.', extra={'shortcode': shortcode, 'event': Event.HIT_NOT_RECORDED})

        return short_url.target

    def stats(self, shortcode: str) -> ShortURLStats:
        """Return usage statistics for a shortcode

        Unlike resolve(), expired short URLs still report their statistics.
        Reading stats never counts as a hit.

        Raises:
            ShortURLNotFoundError:
                If the shortcode doesn't exist.
        """
        short_url = self.dao.get(shortcode)
        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return ShortURLStats(
            shortcode=short_url.shortcode,
            target=short_url.target,
            created_at=short_url.created_at,
            expires_at=short_url.expires_at,
            hits=short_url.hits,
            is_expired=utcnow() > short_url.expires_at,
        )
