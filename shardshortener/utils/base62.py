"""Base62 encoding utility

This module maps non-negative integers onto a fixed Base62 alphabet and back.

Functions:
    encode(number) -> str:
        Encode a non-negative integer as a minimal-length Base62 string.
    decode(value) -> int:
        Decode a Base62 string (leading zero-symbols allowed) back into an integer.

Example:
    >>> from shardshortener.utils.base62 import encode, decode
    >>> encode(0)
    'a'
    >>> encode(12345)
    'dnh'
    >>> decode('aadnh')
    12345
"""

import string


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits
ZERO = ALPHABET[0]

_INDEX = {character: value for value, character in enumerate(ALPHABET)}


def encode(number: int) -> str:
    """Encode a non-negative integer into a Base62 string.

    The result has no leading zero-symbols and its most significant digit
    comes first. `encode(0)` is the single zero-symbol 'a'.

    Args:
        number (int):
            Non-negative integer to encode.

    Returns:
        str: Base62 representation of `number`.

    Raises:
        TypeError: If `number` is not an integer.
        ValueError: If `number` is negative.

    Example:
        >>> encode(1)
        'b'
        >>> encode(62)
        'ba'
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f'Number must be of type integer (given type: {type(number)}).')
    if number < 0:
        raise ValueError(f'Number must be a non-negative integer (given value: {number}).')
    if number == 0:
        return ZERO

    digits = []
    while number > 0:
        number, remainder = divmod(number, BASE)
        digits.append(ALPHABET[remainder])

    # Least significant digit was produced first
    return ''.join(reversed(digits))


def decode(value: str) -> int:
    """Decode a Base62 string into an integer.

    Leading zero-symbols are accepted, so padded payloads decode to the same
    number as their unpadded form.

    Raises:
        TypeError: If `value` is not a string.
        ValueError: If `value` is empty or contains characters outside the alphabet.

    Example:
        >>> decode('aaaaab')
        1
    """
    if not isinstance(value, str):
        raise TypeError(f'Value must be of type string (given type: {type(value)}).')
    if not value:
        raise ValueError('Value must be a non-empty string.')

    number = 0
    for character in value:
        try:
            number = number * BASE + _INDEX[character]
        except KeyError:
            raise ValueError(f"Character '{character}' is not part of the Base62 alphabet (given value: {value}).") from None
    return number
