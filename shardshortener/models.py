from dataclasses import dataclass
from datetime import datetime


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    target: str                         # Original long URL
    shortcode: str                      # Unique short identifier (shard id + base62 payload)
    created_at: datetime                # Creation time (UTC)
    expires_at: datetime                # Creation time + retention period (UTC)
    hits: int = 0                       # Hit count snapshot taken when the record was read


@dataclass(frozen=True)
class ShortenResult:
    shortcode: str                      # Assigned (or previously assigned) shortcode
    short_url: str                      # <base domain>/<shortcode>
    expires_at: datetime                # Expiry of the underlying record


@dataclass(frozen=True)
class ShortURLStats:
    shortcode: str
    target: str
    created_at: datetime
    expires_at: datetime
    hits: int
    is_expired: bool                    # Computed at read time; expired records still report stats
# fmt: on
