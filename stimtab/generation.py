"""Random letter-string stimuli.

Letter strings such as ``"YRTOX"`` are a common stimulus for recognition
memory tasks. Strings are drawn with a seeded ``numpy.random.Generator`` so a
stimulus set can be regenerated exactly.
"""

from __future__ import annotations

import logging
import string

import numpy as np

from stimtab.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = string.ascii_uppercase

# give up on drawing unique strings after this many draws per requested string
_MAX_DRAWS_PER_STRING = 100


def random_strings(
    n: int,
    length: int = 5,
    alphabet: str = DEFAULT_ALPHABET,
    *,
    unique: bool = True,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> list[str]:
    """Draw random strings from an alphabet.

    Parameters
    ----------
    n : int
        Number of strings to draw.
    length : int
        Characters per string (default: 5).
    alphabet : str
        Characters to draw from (default: uppercase ASCII letters).
    unique : bool
        Whether every string must be distinct (default: True).
    seed : int | None
        Seed for a fresh generator. Ignored when ``rng`` is given.
    rng : np.random.Generator | None
        Generator to draw from.

    Returns
    -------
    list[str]
        ``n`` strings in draw order.

    Raises
    ------
    ConfigurationError
        If ``n`` is negative, ``length`` is not positive, the alphabet is
        empty, or more unique strings are requested than exist.

    Examples
    --------
    >>> strings = random_strings(3, seed=42)
    >>> len(strings), all(len(s) == 5 for s in strings)
    (3, True)
    """
    if n < 0:
        raise ConfigurationError(f"n must be non-negative, got {n}")
    if length < 1:
        raise ConfigurationError(f"length must be positive, got {length}")

    symbols = list(dict.fromkeys(alphabet))
    if not symbols:
        raise ConfigurationError("alphabet must not be empty")

    if unique and n > len(symbols) ** length:
        raise ConfigurationError(
            f"Cannot draw {n} unique strings of length {length} "
            f"from {len(symbols)} symbols"
        )

    generator = rng if rng is not None else np.random.default_rng(seed)

    if not unique:
        draws = generator.integers(0, len(symbols), size=(n, length))
        return ["".join(symbols[i] for i in row) for row in draws]

    result: list[str] = []
    seen: set[str] = set()
    max_draws = max(n, 1) * _MAX_DRAWS_PER_STRING
    draws_made = 0
    while len(result) < n:
        if draws_made >= max_draws:
            raise ConfigurationError(
                f"Gave up after {draws_made} draws with {len(result)} of "
                f"{n} unique strings"
            )
        candidate = "".join(
            symbols[i] for i in generator.integers(0, len(symbols), size=length)
        )
        draws_made += 1
        if candidate in seen:
            continue
        seen.add(candidate)
        result.append(candidate)

    logger.debug("Drew %d strings in %d draws", n, draws_made)
    return result
