from shardshortener.utils.config import config_path, load_config, shard_id, log_level
from shardshortener.utils.helpers import get_short_url, utcnow, add_years
from shardshortener.utils.base62 import encode, decode
from shardshortener.utils.generator import ShardedCodeGenerator
from shardshortener.utils.logging import initialize_logging


__all__ = [
    'ShardedCodeGenerator',
    'encode',
    'decode',
    'config_path',
    'load_config',
    'shard_id',
    'log_level',
    'get_short_url',
    'utcnow',
    'add_years',
    'initialize_logging',
]
