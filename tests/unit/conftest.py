from datetime import datetime, UTC

import pytest

from shardshortener.models import ShortURLModel
from shardshortener.dao import ShortURLMemoryDAO
from shardshortener.service import ShortenerService
from shardshortener.utils.generator import ShardedCodeGenerator


@pytest.fixture
def created_at() -> datetime:
    return datetime(2025, 10, 15, 0, 0, 0, tzinfo=UTC)


@pytest.fixture
def short_url(created_at: datetime) -> ShortURLModel:
    return ShortURLModel(
        target='https://example.com/article/123',
        shortcode='A0aaaaab',
        created_at=created_at,
        expires_at=datetime(2030, 10, 15, 0, 0, 0, tzinfo=UTC),
    )


@pytest.fixture
def generator() -> ShardedCodeGenerator:
    return ShardedCodeGenerator('A0')


@pytest.fixture
def dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO()


@pytest.fixture
def service(generator: ShardedCodeGenerator, dao: ShortURLMemoryDAO) -> ShortenerService:
    return ShortenerService(generator, dao)
