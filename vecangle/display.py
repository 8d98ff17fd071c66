"""
Console presentation of ranked pairs.

    𝜃([1, 2, 3], [13, 14, 15]) = 0.329341
"""

from typing import Iterable, TextIO

from vecangle.ranking import AngleResult
from vecangle.vector import Vector

THETA = '𝜃'


def format_vector(v: Vector) -> str:
    return str(v)


def format_result(result: AngleResult, precision: int = 6, symbol: str = THETA) -> str:
    """One output line (no newline) for a ranked pair; angle in fixed-point."""
    return (
        f"{symbol}({format_vector(result.first)}, {format_vector(result.second)}) "
        f"= {result.theta:.{precision}f}"
    )


def render_results(
    results: Iterable[AngleResult],
    stream: TextIO,
    precision: int = 6,
    symbol: str = THETA,
) -> int:
    """Write one line per result to ``stream``. Returns lines written."""
    n = 0
    for result in results:
        stream.write(format_result(result, precision=precision, symbol=symbol) + '\n')
        n += 1
    return n
