"""
Geometric Primitives for the Pressure-Impulse plane.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Union, TYPE_CHECKING
import math
import numpy as np

from blastanalysis.config import ORIGIN_COORDINATES

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """
    A point in the P-I plane.

    Attributes:
        i: Impulse coordinate (horizontal axis).
        p: Pressure coordinate (vertical axis).
    """
    i: float
    p: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.i) and math.isfinite(self.p)):
            raise ValueError(f"Point coordinates must be finite, got ({self.i}, {self.p}).")

    def __iter__(self) -> Iterator[float]:
        yield self.i
        yield self.p

    def to_tuple(self) -> tuple[float, float]:
        return (self.i, self.p)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.i, self.p], dtype=np.float64)

    @classmethod
    def coerce(cls, value: PointLike) -> Point:
        """Accept a Point or an (I, P) pair and return a Point."""
        if isinstance(value, Point):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, (Sequence, np.ndarray)):
            raise TypeError(f"Expected a Point or an (I, P) pair, got {type(value).__name__}.")
        if len(value) != 2:
            raise TypeError(f"Expected an (I, P) pair, got {len(value)} values.")
        i, p = value
        try:
            i, p = float(i), float(p)
        except (TypeError, ValueError) as e:
            raise TypeError(f"(I, P) values must be numbers, got ({i!r}, {p!r}).") from e
        return cls(i, p)


# A Point or a bare (I, P) pair
PointLike = Union[Point, Sequence[float]]

ORIGIN = Point(*ORIGIN_COORDINATES)
