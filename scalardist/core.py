"""
scalardist.core — Edit distance over Unicode scalar values
===========================================================

§1  WHY SCALARS
───────────────

Levenshtein (1965) counts the single-character insertions, deletions and
substitutions needed to turn one string into another.  The word
"character" is where byte-oriented implementations go wrong: in UTF-8 a
character occupies one to four bytes, so an implementation that walks
bytes (or sizes its table from byte counts) reports

    d("🐝🔨", "🔨🐝") = 8        (bytes)

where any reader expects 2.  Everything in this module works on
ScalarSequence, a tuple of Unicode scalar values (code points that are
not surrogates).  The decoding step that produces one lives in
scalardist.formats.


§2  THE RECURRENCE
──────────────────

For A = a₁..aₘ and B = b₁..bₙ:

    D[i][0] = i                      (delete the first i scalars of A)
    D[0][j] = j                      (insert the first j scalars of B)
    D[i][j] = D[i-1][j-1]                              if aᵢ = bⱼ
            = 1 + min(D[i-1][j],                       delete aᵢ
                      D[i][j-1],                       insert bⱼ
                      D[i-1][j-1])                     substitute
                                                       otherwise

    d(A, B) = D[m][n]

All costs are the integer 1, so every cell is an int and no float
tolerance is ever needed.


§3  METRIC PROPERTIES
─────────────────────

With unit costs d is a metric on scalar sequences:
    (i)   d(x, y) ≥ 0,  d(x, y) = 0 ⟺ x = y
    (ii)  d(x, y) = d(y, x)            (swap insert and delete)
    (iii) d(x, z) ≤ d(x, y) + d(y, z)  (compose the two edit scripts)


§4  COMPLEXITY
──────────────

Time O(m·n).  `levenshtein` keeps two rows, O(min(m, n)) memory.
`DistanceMatrix.compute` keeps the full table, O(m·n) memory, which the
trace-back in `DistanceMatrix.script` needs.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Optional, Sequence, Union

from .errors import DecodeError, InvalidInputError

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  COSTS
# ═══════════════════════════════════════════════════════════════════

INSERT_COST = 1
DELETE_COST = 1
SUBSTITUTE_COST = 1


# ═══════════════════════════════════════════════════════════════════
#  SCALAR SEQUENCE
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class ScalarSequence:
    """
    An immutable sequence of Unicode scalar values.

    One element per code point, whatever its width in any encoding.

    Examples:
        ScalarSequence((0x68, 0x69))             # "hi"
        ScalarSequence((0x1F41D, 0x1F528))       # "🐝🔨"

    Any iterable of ints is accepted and frozen into a tuple.  Values
    outside 0..0x10FFFF or inside the surrogate range raise DecodeError;
    non-int values raise InvalidInputError.
    """
    values: tuple[int, ...]

    def __post_init__(self):
        if self.values is None or isinstance(self.values, (str, bytes)):
            raise InvalidInputError(
                f"values must be an iterable of ints, got {type(self.values).__name__}"
            )
        try:
            values = tuple(self.values)
        except TypeError as exc:
            raise InvalidInputError(
                f"values must be an iterable of ints, got {type(self.values).__name__}"
            ) from exc

        for index, v in enumerate(values):
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidInputError(
                    f"scalar at index {index} is {type(v).__name__}, not int"
                )
            if not _is_scalar(v):
                raise DecodeError(f"U+{v:04X} is not a Unicode scalar value",
                                  position=index)

        # frozen: bypass the generated __setattr__
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __str__(self) -> str:
        return "".join(chr(v) for v in self.values)

    def __repr__(self) -> str:
        if len(self.values) <= 8:
            return f"ScalarSequence({str(self)!r})"
        return f"ScalarSequence({str(self)[:8]!r}... len={len(self.values)})"


def _is_scalar(v: int) -> bool:
    return 0 <= v <= 0x10FFFF and not 0xD800 <= v <= 0xDFFF


def _require(value, name: str) -> None:
    if value is None:
        raise InvalidInputError(f"{name} must not be None")


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE (two-row)
# ═══════════════════════════════════════════════════════════════════

def levenshtein(a: Sequence, b: Sequence) -> int:
    """
    Edit distance between two scalar sequences.

    Accepts ScalarSequence or any indexable sequence of comparable items.
    Only a None argument is an error; sequences of different lengths are
    the normal case.
    """
    _require(a, "a")
    _require(b, "b")

    m, n = len(a), len(b)
    if m == 0:
        return n * INSERT_COST
    if n == 0:
        return m * DELETE_COST

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i * DELETE_COST
        ai = a[i - 1]
        for j in range(1, n + 1):
            if ai == b[j - 1]:
                curr[j] = prev[j - 1]
            else:
                curr[j] = min(
                    prev[j] + DELETE_COST,
                    curr[j - 1] + INSERT_COST,
                    prev[j - 1] + SUBSTITUTE_COST,
                )
        prev, curr = curr, prev

    return prev[n]


# ═══════════════════════════════════════════════════════════════════
#  EDIT SCRIPT TYPES
# ═══════════════════════════════════════════════════════════════════

class EditOp(Enum):
    """Types of edit operations."""
    EQUAL = auto()
    INSERT = auto()
    DELETE = auto()
    SUBSTITUTE = auto()


@dataclass(frozen=True)
class EditEntry:
    """
    One step of an edit script.

    `source_index` / `target_index` are positions in the source and
    target sequences.  For INSERT, `source_index` is the position in the
    source before which the scalar goes; for DELETE, `target_index` is
    the position in the target the deletion happens at.
    """
    op: EditOp
    source_index: int
    target_index: int
    old: Optional[Any] = None
    new: Optional[Any] = None

    def __repr__(self) -> str:
        old, new = _show(self.old), _show(self.new)
        if self.op == EditOp.EQUAL:
            return f"EQUAL {old} at {self.source_index}"
        if self.op == EditOp.INSERT:
            return f"INSERT {new} at {self.source_index}"
        if self.op == EditOp.DELETE:
            return f"DELETE {old} at {self.source_index}"
        return f"SUBSTITUTE {old} → {new} at {self.source_index}"


def _show(item) -> str:
    # Scalars print as characters, anything else as itself.
    if isinstance(item, int) and not isinstance(item, bool) and _is_scalar(item):
        return repr(chr(item))
    return repr(item)


# ═══════════════════════════════════════════════════════════════════
#  FULL MATRIX
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DistanceMatrix:
    """
    The complete DP table for one pair of sequences.

    rows[i][j] is the edit distance between source[:i] and target[:j].
    Built once by `compute` and never mutated; source and target are
    stored as tuples.
    """
    source: tuple
    target: tuple
    rows: tuple[tuple[int, ...], ...]

    @classmethod
    def compute(cls, a: Sequence, b: Sequence) -> "DistanceMatrix":
        _require(a, "a")
        _require(b, "b")

        m, n = len(a), len(b)
        logger.debug("building %dx%d distance matrix", m + 1, n + 1)

        table = [[0] * (n + 1) for _ in range(m + 1)]
        for j in range(1, n + 1):
            table[0][j] = table[0][j - 1] + INSERT_COST
        for i in range(1, m + 1):
            table[i][0] = table[i - 1][0] + DELETE_COST

        for i in range(1, m + 1):
            ai = a[i - 1]
            row, above = table[i], table[i - 1]
            for j in range(1, n + 1):
                if ai == b[j - 1]:
                    row[j] = above[j - 1]
                else:
                    row[j] = min(
                        above[j] + DELETE_COST,
                        row[j - 1] + INSERT_COST,
                        above[j - 1] + SUBSTITUTE_COST,
                    )

        return cls(tuple(a), tuple(b), tuple(tuple(row) for row in table))

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.rows), len(self.rows[0])

    @property
    def distance(self) -> int:
        return self.rows[-1][-1]

    def cell(self, i: int, j: int) -> int:
        return self.rows[i][j]

    def script(self) -> list[EditEntry]:
        """
        Trace back from the final cell to the origin, producing the
        minimum edit script.  On ties, prefer the diagonal, then delete,
        then insert.

        The number of non-EQUAL entries equals `self.distance`.
        """
        a, b, d = self.source, self.target, self.rows
        ops: list[EditEntry] = []
        i, j = len(a), len(b)

        while i > 0 or j > 0:
            if i > 0 and j > 0:
                same = a[i - 1] == b[j - 1]
                diag = d[i - 1][j - 1] + (0 if same else SUBSTITUTE_COST)
                if d[i][j] == diag:
                    op = EditOp.EQUAL if same else EditOp.SUBSTITUTE
                    ops.append(EditEntry(op, i - 1, j - 1,
                                         old=a[i - 1], new=b[j - 1]))
                    i -= 1
                    j -= 1
                    continue

            if i > 0 and d[i][j] == d[i - 1][j] + DELETE_COST:
                ops.append(EditEntry(EditOp.DELETE, i - 1, j, old=a[i - 1]))
                i -= 1
                continue

            ops.append(EditEntry(EditOp.INSERT, i, j - 1, new=b[j - 1]))
            j -= 1

        ops.reverse()
        return ops


# ═══════════════════════════════════════════════════════════════════
#  APPLY
# ═══════════════════════════════════════════════════════════════════

def apply_script(source: Sequence,
                 script: list[EditEntry]) -> Union[ScalarSequence, tuple]:
    """
    Apply an edit script to `source`:

        apply_script(a, DistanceMatrix.compute(a, b).script()) == b

    A ScalarSequence source gives a ScalarSequence back; any other
    sequence gives a tuple of its items.

    The script must walk the whole source in order.  An entry whose `old`
    item disagrees with the source raises InvalidInputError.
    """
    _require(source, "source")
    _require(script, "script")

    result: list = []
    cursor = 0

    for entry in script:
        if entry.op == EditOp.INSERT:
            result.append(entry.new)
            continue

        if cursor >= len(source) or source[cursor] != entry.old:
            raise InvalidInputError(
                f"edit script does not match source at index {cursor}: {entry!r}"
            )
        cursor += 1

        if entry.op == EditOp.EQUAL:
            result.append(entry.old)
        elif entry.op == EditOp.SUBSTITUTE:
            result.append(entry.new)

    if cursor != len(source):
        raise InvalidInputError(
            f"edit script stops at index {cursor} of a {len(source)}-scalar source"
        )

    if isinstance(source, ScalarSequence):
        return ScalarSequence(tuple(result))
    return tuple(result)
