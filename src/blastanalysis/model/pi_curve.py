"""
Pressure-Impulse Curves
=======================
Boundary curves in the P-I plane and the load-point assessment against them.

Why is this file needed?
------------------------
1. Assessment: It decides whether the segment from the origin to a load point
   crosses a P-I curve, or any curve in a set (e.g. one per damage level).
2. Counting: It reports how many curves of a set are actually crossed.

Classes:
    Curve: Immutable polyline of (I, P) points.
    CurveModel: Abstract base holding the query logic.
    SingleCurve: Model wrapping exactly one Curve.
    CurveCollection: Model wrapping an ordered set of other models.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Iterator, Optional, Sequence, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from blastanalysis.model.geometry_primitives import ORIGIN, Point, PointLike
from blastanalysis.model.geometry_utils import do_segments_intersect, edges

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Curve:
    """
    A P-I boundary polyline.

    Points are expected in increasing order along one axis; this is not
    validated. Any sequence of Points or (I, P) pairs is accepted and stored
    as a tuple of Points.
    """
    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(Point.coerce(pt) for pt in self.points))
        if not self.points:
            msg = "Curve points cannot be empty."
            logger.error(msg)
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def first(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]

    def edges(self) -> Iterator[tuple[Point, Point]]:
        return edges(self.points)

    def crossed_by(self, load_point: Point) -> bool:
        """True if any edge crosses the segment from the origin to `load_point`."""
        return any(
            do_segments_intersect(ORIGIN, load_point, start, end)
            for start, end in self.edges()
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([pt.to_tuple() for pt in self.points], dtype=np.float64).reshape(-1, 2)


# ==========================================
# ABSTRACT CLASS FOR CURVE MODELS
# ==========================================
class CurveModel(ABC):
    """
    Abstract base class for P-I curve models.

    A model is either a SingleCurve or a CurveCollection. Queries iterate the
    flat sequence of leaf curves given by `curves`, so both behave the same.
    """

    @property
    @abstractmethod
    def curves(self) -> tuple[Curve, ...]:
        """Flat, ordered tuple of the leaf curves."""
        pass

    def intersects(self, load_point: PointLike) -> bool:
        """
        Check whether the load point lies on or beyond any of the curves.

        For each curve, in order:
        1. The load point exceeds the first point on both axes -> True.
        2. The load point exceeds the last point on both axes -> True.
        3. Any edge crosses the segment from the origin to the load point -> True.

        The first positive check ends the search for all curves.

        Args:
            load_point: (I, P) of the load.

        Returns:
            True if an intersection is found.
        """
        load_point = Point.coerce(load_point)

        for index, curve in enumerate(self.curves):
            first, last = curve.first, curve.last

            # Extension of the curve past its first point
            if load_point.i > first.i and load_point.p > first.p:
                logger.debug(f"Load {load_point.to_tuple()} beyond first point of curve {index}.")
                return True

            # Extension of the curve past its last point
            if load_point.i > last.i and load_point.p > last.p:
                logger.debug(f"Load {load_point.to_tuple()} beyond last point of curve {index}.")
                return True

            if curve.crossed_by(load_point):
                logger.debug(f"Load {load_point.to_tuple()} crosses curve {index}.")
                return True

        return False

    def count_intersecting_curves(self, load_point: PointLike) -> int:
        """
        Count the curves that have at least one edge crossed by the segment
        from the origin to the load point.

        Unlike `intersects`, the extension rules are not applied, so a load
        beyond a curve's end points contributes nothing unless an edge is
        actually crossed.
        """
        load_point = Point.coerce(load_point)
        count = sum(1 for curve in self.curves if curve.crossed_by(load_point))
        logger.debug(f"Load {load_point.to_tuple()} crosses {count} of {len(self.curves)} curves.")
        return count

    def plot(
        self,
        load_point: Optional[PointLike] = None,
        ax: Optional[Axes] = None,
        show: bool = True,
    ) -> Figure:
        """
        Plot the curves and, optionally, the load ray from the origin.

        Args:
            load_point: (I, P) of the load to draw.
            ax: Axes to draw into. A new figure is created when omitted.
            show: Call plt.show() at the end.

        Returns:
            The figure that was drawn into.
        """
        if ax is None:
            plt.rcParams["figure.constrained_layout.use"] = True
            fig, ax = plt.subplots(figsize=(7, 5))
        else:
            fig = ax.figure

        for index, curve in enumerate(self.curves):
            data = curve.to_array()
            ax.plot(data[:, 0], data[:, 1], 'o-', lw=2, label=f"Curve {index + 1}")

        if load_point is not None:
            load_point = Point.coerce(load_point)
            ray = np.vstack((ORIGIN.to_array(), load_point.to_array()))
            color = 'r' if self.intersects(load_point) else 'g'
            ax.plot(ray[:, 0], ray[:, 1], '--', color=color, lw=1)
            ax.plot(load_point.i, load_point.p, 'x', color=color, ms=10, label="Load")

        ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax.minorticks_on()
        ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        ax.set_title("Pressure-Impulse Diagram")
        ax.set_xlabel("Impulse I")
        ax.set_ylabel("Pressure P")
        ax.legend()

        if show:
            plt.show()
        return fig


class SingleCurve(CurveModel):
    """Model wrapping exactly one P-I curve."""

    def __init__(self, points: Optional[Sequence[PointLike]]) -> None:
        if points is None:
            msg = "Curve points cannot be None."
            logger.error(msg)
            raise ValueError(msg)

        curve = Curve(points)
        self._curve = curve
        logger.debug(f"Created single curve with {len(curve)} points.")

    @property
    def curve(self) -> Curve:
        return self._curve

    @property
    def points(self) -> tuple[Point, ...]:
        return self._curve.points

    @property
    def curves(self) -> tuple[Curve, ...]:
        return (self._curve,)

    def __repr__(self) -> str:
        return f"SingleCurve({[pt.to_tuple() for pt in self.points]})"


class CurveCollection(CurveModel):
    """
    Model wrapping an ordered, non-empty set of other models.

    Nested collections are flattened depth-first, keeping member order.
    """

    def __init__(self, models: Optional[Sequence[CurveModel]]) -> None:
        if models is None or len(models) == 0:
            msg = "Curves collection cannot be None or empty."
            logger.error(msg)
            raise ValueError(msg)

        for model in models:
            if not isinstance(model, CurveModel):
                msg = f"Collection members must be CurveModel instances, got {type(model).__name__}."
                logger.error(msg)
                raise TypeError(msg)

        self._models = tuple(models)
        self._curves = tuple(curve for model in self._models for curve in model.curves)
        logger.debug(f"Created curve collection with {len(self._curves)} curves.")

    @property
    def models(self) -> tuple[CurveModel, ...]:
        return self._models

    @property
    def curves(self) -> tuple[Curve, ...]:
        return self._curves

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        return f"CurveCollection({list(self._models)!r})"
