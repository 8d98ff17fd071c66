"""
Error taxonomy.

Every failure is fatal to the run in progress. Nothing is retried
and no partial result is passed off as complete.
"""

from typing import List, Optional


class VecAngleError(Exception):
    """Base class for all vecangle errors."""


class DimensionMismatch(VecAngleError, ValueError):
    """
    Two vectors of different length were combined, or an ingested
    vector does not match the dimension of the first one.

    Attributes
    ----------
    expected, actual : int
        The two dimensions that disagreed.
    line_number : int or None
        1-based input line, when raised by ingestion.
    parsed : list of Vector
        Vectors accepted before the failing line (ingestion only).
    """

    def __init__(
        self,
        expected: int,
        actual: int,
        line_number: Optional[int] = None,
        parsed: Optional[List] = None,
    ):
        self.expected = expected
        self.actual = actual
        self.line_number = line_number
        self.parsed = list(parsed) if parsed is not None else []
        if line_number is None:
            msg = f"mismatched vector dimensions: {expected} vs {actual}"
        else:
            msg = (
                f"mismatched input vector dimensions on line {line_number}: "
                f"expected {expected}, got {actual}"
            )
        super().__init__(msg)


class MalformedLine(VecAngleError, ValueError):
    """A token could not be parsed as a float (strict ingestion only)."""

    def __init__(self, line_number: int, token: str):
        self.line_number = line_number
        self.token = token
        super().__init__(f"line {line_number}: cannot parse {token!r} as a number")


class InputUnavailable(VecAngleError, OSError):
    """The input source could not be opened for reading."""


class ConfigError(VecAngleError, ValueError):
    """Invalid or unreadable configuration override."""
