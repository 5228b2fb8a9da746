"""Unit tests for the dataclasses in models.py.

Test coverage includes:

1. Model creation and defaults
2. Equality semantics
3. Immutability
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, UTC

import pytest

from shardshortener.models import ShortURLModel, ShortenResult, ShortURLStats


CREATED_AT = datetime(2025, 10, 15, 0, 0, 0, tzinfo=UTC)
EXPIRES_AT = datetime(2030, 10, 15, 0, 0, 0, tzinfo=UTC)


# -------------------------------------------------
# 1. Model creation and defaults
# -------------------------------------------------


def test_short_url_model_creation():
    short_url = ShortURLModel(
        target='https://example.com/article/123',
        shortcode='A0aaaaab',
        created_at=CREATED_AT,
        expires_at=EXPIRES_AT,
        hits=3,
    )

    assert short_url.target == 'https://example.com/article/123'
    assert short_url.shortcode == 'A0aaaaab'
    assert short_url.created_at == CREATED_AT
    assert short_url.expires_at == EXPIRES_AT
    assert short_url.hits == 3


def test_hits_defaults_to_zero():
    short_url = ShortURLModel(target='https://example.com', shortcode='A0aaaaab', created_at=CREATED_AT, expires_at=EXPIRES_AT)
    assert short_url.hits == 0


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------


def test_short_url_model_equality():
    left = ShortURLModel(target='https://example.com', shortcode='A0aaaaab', created_at=CREATED_AT, expires_at=EXPIRES_AT)
    right = ShortURLModel(target='https://example.com', shortcode='A0aaaaab', created_at=CREATED_AT, expires_at=EXPIRES_AT)
    assert left == right


@pytest.mark.parametrize(
    'overrides',
    [
        {'target': 'https://example.com/other'},
        {'shortcode': 'A0aaaaac'},
        {'created_at': datetime(2025, 10, 16, tzinfo=UTC)},
        {'expires_at': datetime(2030, 10, 16, tzinfo=UTC)},
        {'hits': 1},
    ],
)
def test_short_url_model_inequality(overrides):
    fields = {'target': 'https://example.com', 'shortcode': 'A0aaaaab', 'created_at': CREATED_AT, 'expires_at': EXPIRES_AT}
    assert ShortURLModel(**fields) != ShortURLModel(**(fields | overrides))


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


@pytest.mark.parametrize(
    'model, field, new_value',
    [
        (ShortURLModel('https://example.com', 'A0aaaaab', CREATED_AT, EXPIRES_AT), 'hits', 10),
        (ShortURLModel('https://example.com', 'A0aaaaab', CREATED_AT, EXPIRES_AT), 'target', 'https://evil.example'),
        (ShortenResult('A0aaaaab', 'https://sho.rt/A0aaaaab', EXPIRES_AT), 'shortcode', 'A0aaaaac'),
        (ShortURLStats('A0aaaaab', 'https://example.com', CREATED_AT, EXPIRES_AT, 0, False), 'is_expired', True),
    ],
)
def test_models_are_immutable(model, field, new_value):
    with pytest.raises(FrozenInstanceError):
        setattr(model, field, new_value)
