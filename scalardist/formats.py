"""
scalardist.formats — Convert between real-world text and scalar sequences.

Supported conversions:
    • str                          → ScalarSequence (one element per code point)
    • bytes / bytearray / memoryview → ScalarSequence (strict decode, any codec)
    • ScalarSequence               → str / bytes

The element count never depends on how many bytes a character takes.
"""

import logging
import unicodedata
from typing import Iterable, Optional, Union

from .core import ScalarSequence
from .errors import DecodeError, InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
NORMALIZATION_FORMS = frozenset({"NFC", "NFD", "NFKC", "NFKD"})

TextLike = Union[str, bytes, bytearray, memoryview, ScalarSequence]


# ═══════════════════════════════════════════════════════════════════
#  TEXT → SCALARS
# ═══════════════════════════════════════════════════════════════════

def to_scalars(text: TextLike, encoding: str = DEFAULT_ENCODING,
               normalize: Optional[str] = None) -> ScalarSequence:
    """
    Decode `text` into a ScalarSequence.

    Mapping:
        str             → its code points
        bytes-like      → decoded strictly with `encoding`, then as str
        ScalarSequence  → returned as is (re-normalized if `normalize` is set)

    `normalize` names a Unicode normalization form (NFC, NFD, NFKC, NFKD)
    applied before splitting, so "é" and "e\\u0301" can compare equal.

    Raises DecodeError on malformed bytes, unknown codecs, or a str that
    holds a lone surrogate.  Raises InvalidInputError on None and on
    unsupported argument types.
    """
    if text is None:
        raise InvalidInputError("text must not be None")

    if isinstance(text, ScalarSequence):
        if normalize is None:
            return text
        text = str(text)
    elif isinstance(text, (bytes, bytearray, memoryview)):
        text = _decode_bytes(bytes(text), encoding)
    elif not isinstance(text, str):
        raise InvalidInputError(
            f"expected str, bytes or ScalarSequence, got {type(text).__name__}"
        )

    if normalize is not None:
        text = _normalize(text, normalize)

    _reject_surrogates(text)
    return ScalarSequence(tuple(ord(c) for c in text))


def _decode_bytes(data: bytes, encoding: str) -> str:
    if not isinstance(encoding, str):
        raise InvalidInputError(
            f"encoding must be a codec name, got {type(encoding).__name__}"
        )
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.debug("malformed %s input at byte %d: %s",
                     encoding, exc.start, exc.reason)
        raise DecodeError(exc.reason, encoding=encoding,
                          position=exc.start) from exc
    except LookupError as exc:
        logger.debug("unknown encoding %r", encoding)
        raise DecodeError(f"unknown encoding {encoding!r}",
                          encoding=encoding) from exc


def _normalize(text: str, form: str) -> str:
    if form not in NORMALIZATION_FORMS:
        raise InvalidInputError(
            f"unknown normalization form {form!r}, "
            f"expected one of {sorted(NORMALIZATION_FORMS)}"
        )
    return unicodedata.normalize(form, text)


def _reject_surrogates(text: str) -> None:
    # Surrogate code points are not scalar values; Python str can still hold them.
    for index, char in enumerate(text):
        if "\ud800" <= char <= "\udfff":
            logger.debug("lone surrogate U+%04X at index %d", ord(char), index)
            raise DecodeError(f"lone surrogate U+{ord(char):04X}",
                              position=index)


# ═══════════════════════════════════════════════════════════════════
#  SCALARS → TEXT
# ═══════════════════════════════════════════════════════════════════

def from_scalars(seq: Union[ScalarSequence, Iterable[int]]) -> str:
    """
    Rebuild the text a ScalarSequence was decoded from.

    Inverse of to_scalars for str input.  Plain int iterables are
    checked the same way ScalarSequence checks them.
    """
    if seq is None:
        raise InvalidInputError("seq must not be None")
    if not isinstance(seq, ScalarSequence):
        seq = ScalarSequence(seq)
    return str(seq)


def to_bytes(seq: Union[ScalarSequence, Iterable[int]],
             encoding: str = DEFAULT_ENCODING) -> bytes:
    """Encode a scalar sequence with `encoding` (strict)."""
    text = from_scalars(seq)
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as exc:
        raise DecodeError(exc.reason, encoding=encoding,
                          position=exc.start) from exc
    except LookupError as exc:
        raise DecodeError(f"unknown encoding {encoding!r}",
                          encoding=encoding) from exc
