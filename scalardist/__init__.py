"""
scalardist — Unicode-aware edit distance
========================================

Levenshtein distance counted in Unicode scalar values, not bytes.

    distance("kitten", "sitting")        → 3
    distance("🐝🔨", "🔨🐝")              → 2      (a byte-level count gives 8)
    distance(b"caf\\xc3\\xa9", "cafe")    → 1      (bytes are decoded first)

Text goes through one decoding step (scalardist.formats.to_scalars) that
yields a ScalarSequence, one element per code point whatever its encoded
width.  Malformed input raises DecodeError; a missing argument raises
InvalidInputError.

Beyond the number, `diff` returns the minimum edit script and `patch`
replays it.
"""

import logging

from scalardist.core import (
    # Types
    ScalarSequence,
    DistanceMatrix,
    EditOp,
    EditEntry,
    # Sequence-level
    levenshtein,
    apply_script,
)
from scalardist.errors import ScalarDistError, DecodeError, InvalidInputError
from scalardist.formats import (
    DEFAULT_ENCODING, to_scalars, from_scalars, to_bytes,
)
from scalardist.api import (
    distance, normalized_distance, similarity, diff, patch, closest, changes,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "ScalarSequence", "DistanceMatrix", "EditOp", "EditEntry",
    "levenshtein", "apply_script",
    "ScalarDistError", "DecodeError", "InvalidInputError",
    "DEFAULT_ENCODING", "to_scalars", "from_scalars", "to_bytes",
    "distance", "normalized_distance", "similarity",
    "diff", "patch", "closest", "changes",
]
