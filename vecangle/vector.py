"""
Vector value type and the three numeric operations on it.

A Vector wraps a read-only float64 array. Its length is fixed at
construction and every vector combined with it must share that length.

    norm(v)     = sqrt(dot(v, v))
    dot(a, b)   = Σ a[i] * b[i]
    theta(a, b) = arccos(dot(a, b) / (norm(a) * norm(b)))   ∈ [0, π]

A zero-norm operand makes theta NaN. numpy reports the 0/0 division
as a RuntimeWarning; it is not special-cased here.
"""

from typing import Iterable, Iterator, List, Union

import numpy as np

from vecangle.errors import DimensionMismatch


class Vector:
    """
    Immutable, fixed-length sequence of floats.

    Parameters
    ----------
    values : iterable of float
        Elements, copied into a private array.
    """

    __slots__ = ('_data',)

    def __init__(self, values: Union[Iterable[float], np.ndarray] = ()):
        if isinstance(values, Vector):
            data = values._data.copy()
        elif isinstance(values, np.ndarray):
            data = np.array(values, dtype=np.float64).ravel()
        else:
            data = np.fromiter((float(x) for x in values), dtype=np.float64)
        data.flags.writeable = False
        self._data = data

    # ------------------------------------------------------------------
    # Sequence protocol (read-only)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._data.shape[0]

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._data)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    @property
    def dim(self) -> int:
        """Number of elements."""
        return len(self)

    def to_list(self) -> List[float]:
        return [float(x) for x in self._data]

    def as_array(self) -> np.ndarray:
        """Read-only view of the underlying float64 array."""
        return self._data

    # ------------------------------------------------------------------
    # Numeric operations
    # ------------------------------------------------------------------

    def norm(self) -> float:
        """Euclidean norm. The empty vector has norm 0."""
        return float(np.sqrt(_dot(self, self)))

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __str__(self) -> str:
        return '[' + ', '.join(format_element(x) for x in self) + ']'

    def __repr__(self) -> str:
        return f'Vector({self})'


def format_element(x: float) -> str:
    """
    Shortest text that parses back to exactly ``x``.

    Integral values drop the trailing '.0', so 1.0 renders as '1'.
    """
    text = repr(float(x))
    if text.endswith('.0'):
        return text[:-2]
    return text


def _check_compatible(a: Vector, b: Vector) -> None:
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))


def _dot(a: Vector, b: Vector) -> np.float64:
    # Kept as a numpy scalar so a zero norm divides to NaN instead of raising.
    return np.dot(a.as_array(), b.as_array())


def dot(a: Vector, b: Vector) -> float:
    """
    Dot product of two equal-length vectors.

    Raises
    ------
    DimensionMismatch
        If ``len(a) != len(b)``.
    """
    _check_compatible(a, b)
    return float(_dot(a, b))


def theta(a: Vector, b: Vector) -> float:
    """
    Angle in radians between ``a`` and ``b``, in [0, π].

    The cosine is clamped to [-1, 1] so parallel vectors give 0 rather
    than NaN from a last-bit overshoot. NaN from a zero-norm operand
    passes through the clamp unchanged.

    Raises
    ------
    DimensionMismatch
        If ``len(a) != len(b)``.
    """
    _check_compatible(a, b)
    norm_product = np.sqrt(_dot(a, a)) * np.sqrt(_dot(b, b))
    cosine = _dot(a, b) / norm_product
    return float(np.arccos(np.clip(cosine, -1.0, 1.0)))


angle = theta
