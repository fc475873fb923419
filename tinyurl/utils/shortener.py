"""URL key generation utility

This module maps numeric identifiers to short, human-friendly URL keys using
positional base58 encoding, and draws the numeric identifiers themselves.

Functions:
    encode(num: int) -> str:
        Encode a non-negative integer into a base58 URL key.
    decode(url_key: str) -> int:
        Decode a base58 URL key back into its numeric identifier.
    generate_base10_id(now: datetime | None = None) -> int:
        Draw a fresh numeric identifier for a new URL document.

Example:
    >>> from tinyurl.utils import encode, decode
    >>> encode(2468135791013)
    '27qMi57J'
    >>> decode('27qMi57J')
    2468135791013
"""

import random
from datetime import datetime, UTC

from tinyurl.exceptions import InvalidInputError


# Base58 alphabet: digits + letters without the look-alikes '0', 'O', 'I' and 'l'
ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'
BASE = len(ALPHABET)

_INDEX = {char: i for i, char in enumerate(ALPHABET)}


def encode(num: int) -> str:
    """Encode a non-negative integer into a base58 URL key.

    The most significant digit comes first. Zero encodes to the first
    alphabet character rather than an empty string.

    Args:
        num (int):
            Numeric identifier of the URL document.

    Returns:
        str: base58 representation of num.

    Raises:
        InvalidInputError:
            If num is not a non-negative integer.

    Example:
        >>> encode(0)
        '1'
        >>> encode(5638910482)
        '9bHtdX'
    """
    # bool is an int subclass, but True isn't an identifier
    if not isinstance(num, int) or isinstance(num, bool):
        raise InvalidInputError(f'Numeric id must be of type integer (given type: {type(num)}).')
    if num < 0:
        raise InvalidInputError(f'Numeric id must be a non-negative integer (given value: {num}).')

    digits = []
    while True:
        num, remainder = divmod(num, BASE)
        digits.append(ALPHABET[remainder])
        if num == 0:
            break
    return ''.join(reversed(digits))


def decode(url_key: str) -> int:
    """Decode a base58 URL key back into its numeric identifier.

    Args:
        url_key (str):
            URL key produced by encode().

    Returns:
        int: the numeric identifier.

    Raises:
        InvalidInputError:
            If url_key is empty or contains characters outside the alphabet.
    """
    if not isinstance(url_key, str) or not url_key:
        raise InvalidInputError(f'URL key must be a non-empty string (given value: {url_key!r}).')

    num = 0
    for char in url_key:
        try:
            num = num * BASE + _INDEX[char]
        except KeyError:
            raise InvalidInputError(f"URL key contains invalid character '{char}' (given value: {url_key!r}).") from None
    return num


def generate_base10_id(now: datetime | None = None) -> int:
    """Draw a numeric identifier for a new URL document.

    The identifier is drawn uniformly from [0, current unix timestamp in seconds).

    NOTE:
        - This trades strict uniqueness for simplicity: two concurrent draws
          can collide. The Redis store rejects duplicate keys and the mutation
          service redraws, but nothing reserves an id ahead of the write.
        - For stronger guarantees, swap in a global counter or a 64-bit random
          space with a collision check against the store.
        - Not a cryptographic source; keys are guessable.

    Args:
        now (datetime | None):
            Generation time. Defaults to the current UTC time.

    Returns:
        int: a non-negative identifier.
    """
    now = now or datetime.now(UTC)
    return random.randrange(max(int(now.timestamp()), 1))
