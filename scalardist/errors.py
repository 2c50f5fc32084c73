"""
scalardist.errors — Exceptions raised by the library.

Both concrete errors also derive from the built-in exception a caller
would naturally catch (ValueError for bad data, TypeError for bad
arguments), so `except ValueError:` keeps working around scalardist calls.
"""

from typing import Optional


class ScalarDistError(Exception):
    """Base class for every error raised by scalardist."""


class DecodeError(ScalarDistError, ValueError):
    """
    Input could not be turned into a sequence of Unicode scalar values.

    Raised for malformed byte sequences, strings holding lone surrogates,
    unknown codec names, and scalars the target encoding cannot represent.
    """

    def __init__(self, reason: str, encoding: Optional[str] = None,
                 position: Optional[int] = None):
        self.reason = reason
        self.encoding = encoding
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.reason]
        if self.encoding is not None:
            parts.append(f"encoding={self.encoding}")
        if self.position is not None:
            parts.append(f"position={self.position}")
        return ", ".join(parts)


class InvalidInputError(ScalarDistError, TypeError):
    """A required argument was missing (None) or of an unsupported kind."""
