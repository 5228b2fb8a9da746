"""Helper utilities for the shortener core.

Functions:
    get_short_url(shortcode, base_domain) -> str
        Get string representation of short URL for a given shortcode
    utcnow() -> datetime
        Current time as a timezone-aware UTC datetime
    add_years(moment, years) -> datetime
        Shift a datetime by whole calendar years

Example:
    >>> from shardshortener.utils.helpers import get_short_url
    >>> get_short_url('A0aaaaab', 'https://sho.rt/')
    'https://sho.rt/A0aaaaab'
"""

from datetime import datetime, UTC


def get_short_url(shortcode: str, base_domain: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_domain (str): scheme and host the short URL is served from

    Returns:
        str: short url string representation
    """
    return f'{base_domain.rstrip("/")}/{shortcode}'


def utcnow() -> datetime:
    return datetime.now(UTC)


def add_years(moment: datetime, years: int) -> datetime:
    """Shift a datetime by whole calendar years.

    February 29th maps to February 28th when the target year is not a leap year.

    Example:
        >>> add_years(datetime(2024, 2, 29, tzinfo=UTC), 5)
        datetime.datetime(2029, 2, 28, 0, 0, tzinfo=datetime.timezone.utc)
    """
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)

