"""
scalardist.api — Text-level entry points.

Every function here decodes its text arguments with `to_scalars` and
hands the resulting scalar sequences to scalardist.core.  Nothing is
cached and nothing is shared between calls.
"""

import logging
from typing import Iterable, Optional

from .core import DistanceMatrix, EditEntry, EditOp, apply_script, levenshtein
from .errors import InvalidInputError
from .formats import DEFAULT_ENCODING, TextLike, from_scalars, to_scalars

logger = logging.getLogger(__name__)


def distance(a: TextLike, b: TextLike, *, encoding: str = DEFAULT_ENCODING,
             normalize: Optional[str] = None) -> int:
    """
    Edit distance between two texts, counted in Unicode scalar values.

        distance("kitten", "sitting")  → 3
        distance("🐝🔨", "🔨🐝")        → 2

    `a` and `b` may be str, bytes-like (decoded with `encoding`) or
    ScalarSequence.  Raises DecodeError for malformed input and
    InvalidInputError for None.
    """
    sa = to_scalars(a, encoding, normalize)
    sb = to_scalars(b, encoding, normalize)
    return levenshtein(sa, sb)


def normalized_distance(a: TextLike, b: TextLike, *,
                        encoding: str = DEFAULT_ENCODING,
                        normalize: Optional[str] = None) -> float:
    """
    Edit distance divided by the longer length, in [0, 1].

    0.0 = identical (including two empty texts)
    1.0 = nothing in common
    """
    sa = to_scalars(a, encoding, normalize)
    sb = to_scalars(b, encoding, normalize)
    longest = max(len(sa), len(sb))
    if longest == 0:
        return 0.0
    return levenshtein(sa, sb) / longest


def similarity(a: TextLike, b: TextLike, *, encoding: str = DEFAULT_ENCODING,
               normalize: Optional[str] = None) -> float:
    """1 - normalized_distance."""
    return 1.0 - normalized_distance(a, b, encoding=encoding,
                                     normalize=normalize)


def diff(a: TextLike, b: TextLike, *, encoding: str = DEFAULT_ENCODING,
         normalize: Optional[str] = None) -> list[EditEntry]:
    """
    Minimum edit script turning `a` into `b`, one entry per scalar.

    The entries that are not EQUAL add up to distance(a, b).
    """
    sa = to_scalars(a, encoding, normalize)
    sb = to_scalars(b, encoding, normalize)
    return DistanceMatrix.compute(sa, sb).script()


def patch(a: TextLike, script: list[EditEntry], *,
          encoding: str = DEFAULT_ENCODING,
          normalize: Optional[str] = None) -> str:
    """
    Apply an edit script from `diff` to `a`:

        patch(a, diff(a, b)) == b
    """
    sa = to_scalars(a, encoding, normalize)
    return from_scalars(apply_script(sa, script))


def closest(query: TextLike, candidates: Iterable[TextLike], *,
            encoding: str = DEFAULT_ENCODING,
            normalize: Optional[str] = None) -> Optional[tuple[TextLike, int]]:
    """
    The candidate nearest to `query` and its distance, as a tuple.

    Ties go to the earliest candidate.  Returns None when `candidates`
    is empty.
    """
    if candidates is None:
        raise InvalidInputError("candidates must not be None")

    sq = to_scalars(query, encoding, normalize)
    best = None
    for candidate in candidates:
        d = levenshtein(sq, to_scalars(candidate, encoding, normalize))
        if best is None or d < best[1]:
            best = (candidate, d)
            if d == 0:
                break
    if best is not None:
        logger.debug("closest match at distance %d", best[1])
    return best


def changes(script: list[EditEntry]) -> list[EditEntry]:
    """The entries of `script` that actually edit something."""
    return [entry for entry in script if entry.op != EditOp.EQUAL]
