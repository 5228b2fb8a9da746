from enum import StrEnum


class ShortCode:
    """Short code layout."""

    LENGTH = 8  # shard id (2 chars) + padded base62 payload (6 chars)
    MAX_GENERATION_ATTEMPTS = 10


class Retention:
    """Short URL retention period (data retention is a read-time check)."""

    YEARS = 5


class DefaultConfig:
    """Default configuration values."""

    SHARD_ID = 'A0'
    LOG_LEVEL = 'INFO'
    STORE_STRIPES = 16


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_PATH = 'SHORTENER_CONFIG'

    class Generator(StrEnum):
        SHARD_ID = 'SHARD_ID'


class Event(StrEnum):
    """Log event names attached via `extra={'event': ...}`."""

    SHORT_URL_CREATED = 'SHORT_URL_CREATED'
    SHORT_URL_REUSED = 'SHORT_URL_REUSED'
    SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
    DANGLING_REVERSE_INDEX = 'DANGLING_REVERSE_INDEX'
    GENERATION_EXHAUSTED = 'GENERATION_EXHAUSTED'
    SHORTCODE_WIDTH_OVERFLOW = 'SHORTCODE_WIDTH_OVERFLOW'
    SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
    SHORT_URL_EXPIRED = 'SHORT_URL_EXPIRED'
    HIT_NOT_RECORDED = 'HIT_NOT_RECORDED'
