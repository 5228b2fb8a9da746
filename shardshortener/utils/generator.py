"""Sharded sequence shortcode generator

Shortcodes are built as `<shard id><base62(sequence)>`, with the encoded
sequence left-padded with the alphabet's zero-symbol so that codes have a
fixed total length, e.g. 'A0aaaaab' for the first code of shard 'A0'.

The sequence lives in process memory: it starts at 0, is incremented exactly
once per generated code and is lost on restart.

Classes:
    ShardedCodeGenerator:
        Thread-safe, monotonic shortcode generator for a single shard.

Example:
    >>> from shardshortener.utils.generator import ShardedCodeGenerator
    >>> generator = ShardedCodeGenerator('A0')
    >>> generator.generate_code(8)
    'A0aaaaab'
    >>> generator.generate_code(8)
    'A0aaaaac'
"""

import re
import logging
import threading

from shardshortener.constants import ShortCode, Event
from shardshortener.exceptions import BadConfigurationError, InvalidArgumentError
from shardshortener.utils.base62 import encode, BASE, ZERO
from shardshortener.utils.config import shard_id as configured_shard_id


logger = logging.getLogger(__name__)

SHARD_ID_PATTERN = re.compile(r'[A-Z][0-9]')


class ShardedCodeGenerator:
    """Generate unique shortcodes from a shard id and a monotonic sequence.

    Attributes:
        shard_id (str):
            Fixed shard prefix: one uppercase letter followed by one digit.
        sequence (int):
            Last sequence value handed out (0 before the first code).

    NOTE:
        If the encoded sequence outgrows the payload width, the returned code is
        longer than the requested total length. The code is neither truncated
        nor wrapped around, since both would break uniqueness.
    """

    def __init__(self, shard_id: str):
        if not isinstance(shard_id, str) or SHARD_ID_PATTERN.fullmatch(shard_id) is None:
            raise BadConfigurationError(f"Shard id must be 2 characters in the form A0..Z9 (given value: {shard_id!r}).")

        self._shard_id = shard_id
        self._sequence = 0
        self._lock = threading.Lock()
        self._overflow_reported = False

    @classmethod
    def from_config(cls, config: dict | None = None) -> 'ShardedCodeGenerator':
        """Build a generator for the shard id configured via `SHARD_ID`, the config file or the default."""
        return cls(configured_shard_id(config))

    @property
    def shard_id(self) -> str:
        return self._shard_id

    @property
    def sequence(self) -> int:
        with self._lock:
            return self._sequence

    def generate_code(self, total_length: int = ShortCode.LENGTH) -> str:
        """Generate the next shortcode for this shard.

        Args:
            total_length (int):
                Requested code length, including the shard id. Must leave room
                for at least one payload character.

        Returns:
            str: `shard_id` followed by the zero-padded Base62 sequence.

        Raises:
            InvalidArgumentError:
                If `total_length` is smaller than `len(shard_id) + 1`.

        Example:
            >>> ShardedCodeGenerator('B7').generate_code(5)
            'B7aab'
        """
        if not isinstance(total_length, int) or isinstance(total_length, bool):
            raise InvalidArgumentError(f'Total length must be of type integer (given type: {type(total_length)}).')
        minimum_length = len(self._shard_id) + 1
        if total_length < minimum_length:
            raise InvalidArgumentError(f'Total length must be >= {minimum_length} (given value: {total_length}).')

        payload_length = total_length - len(self._shard_id)
        with self._lock:
            self._sequence += 1
            sequence = self._sequence
            report_overflow = not self._overflow_reported and sequence >= BASE**payload_length
            if report_overflow:
                self._overflow_reported = True

        payload = encode(sequence).rjust(payload_length, ZERO)
        if report_overflow:
            logger.warning(
                'Sequence outgrew the shortcode payload width. Codes now exceed the requested length.',
                extra={'shardId': self._shard_id, 'sequence': sequence, 'totalLength': total_length, 'event': Event.SHORTCODE_WIDTH_OVERFLOW},
            )

        return self._shard_id + payload
