"""
Ingestion: text lines → list of Vector.

Each line is one vector; tokens are separated by whitespace. The first
vector fixes the dimension for the whole dataset and every later line
must match it.

Parsing modes:
    lenient (default)  a line's vector is its run of leading numeric
                       tokens; parsing stops at the first token that
                       is not a float ("1 2 x 4" → [1, 2])
    strict             any unparseable token raises MalformedLine

A numeric token is a plain decimal or scientific literal: optional sign,
digits with an optional point, optional exponent. Python-only spellings
such as "1_000", "nan" and "inf" are not numbers here.

Undecodable bytes in a file are read as U+FFFD, so they end a lenient
line or raise MalformedLine in strict mode like any other bad token.

Usage:
    from vecangle.ingest import ingest_vectors, read_vectors

    with open("vectors.txt") as f:
        vectors = ingest_vectors(f)

    vectors = read_vectors("vectors.txt", strict=True)
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from vecangle.errors import DimensionMismatch, InputUnavailable, MalformedLine
from vecangle.vector import Vector

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def parse_line(line: str, line_number: int = 1, strict: bool = False) -> Vector:
    """
    Parse one line into a Vector.

    Args:
        line: Raw text, whitespace-separated floats.
        line_number: 1-based position, used in error messages.
        strict: Raise on the first unparseable token instead of stopping.
    """
    values = []
    for token in line.split():
        if not NUMBER_RE.fullmatch(token):
            if strict:
                raise MalformedLine(line_number, token)
            break
        values.append(float(token))
    return Vector(values)


def ingest_vectors(
    lines: Iterable[str],
    strict: bool = False,
    skip_blank: bool = False,
) -> List[Vector]:
    """
    Parse a stream of lines into vectors of one shared dimension.

    Args:
        lines: Any iterable of text lines (open file, StringIO, list).
        strict: Reject unparseable tokens (see module docstring).
        skip_blank: Ignore whitespace-only lines instead of reading
                    them as empty vectors.

    Returns:
        Vectors in input order. Empty input gives an empty list.

    Raises:
        DimensionMismatch: A vector's length differs from the first
            vector's. ``parsed`` holds the vectors read before it.
        MalformedLine: Unparseable token in strict mode.
    """
    vectors: List[Vector] = []
    for line_number, line in enumerate(lines, start=1):
        if skip_blank and not line.strip():
            continue
        v = parse_line(line, line_number=line_number, strict=strict)
        if vectors and len(v) != len(vectors[0]):
            raise DimensionMismatch(
                len(vectors[0]), len(v),
                line_number=line_number,
                parsed=vectors,
            )
        vectors.append(v)

    if vectors:
        logger.debug("ingested %d vectors of dimension %d", len(vectors), len(vectors[0]))
    else:
        logger.debug("ingested empty input")
    return vectors


def read_vectors(
    path: Union[str, Path],
    strict: bool = False,
    skip_blank: bool = False,
    encoding: Optional[str] = 'utf-8',
) -> List[Vector]:
    """
    Open ``path`` and ingest it.

    Raises:
        InputUnavailable: The file cannot be opened.
    """
    path = Path(path)
    try:
        f = open(path, encoding=encoding, errors='replace')
    except OSError as e:
        raise InputUnavailable(f"cannot open input file {str(path)!r}: {e.strerror or e}") from e
    with f:
        return ingest_vectors(f, strict=strict, skip_blank=skip_blank)
