"""Clamped B-spline curves with exact and penalised interpolation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = ["clamped_knots", "BSpline"]

_MAX_SPAN_ITERATIONS = 100
_RESIDUAL_TOLERANCE = 1e-8


def clamped_knots(cp_count: int, degree: int) -> np.ndarray:
    """Open uniform knot vector on [0, 1] for ``cp_count`` points of ``degree``.

    The vector holds ``cp_count + degree + 1`` knots, the first and last
    ``degree + 1`` of them clamped to 0 and 1.
    """
    last = cp_count + degree
    knots = []
    for i in range(last + 1):
        if i <= degree:
            knots.append(0.0)
        elif i >= cp_count:
            knots.append(1.0)
        else:
            knots.append((i - degree) / (cp_count - degree))
    return np.array(knots, dtype=float)


def _as_points(points) -> np.ndarray:
    """Stack points into an ``(count, dimension)`` float array."""
    array = np.array(points, dtype=float)
    if array.ndim == 1:
        array = array[:, np.newaxis]
    if array.ndim != 2:
        raise ValueError("points must be a sequence of vectors")
    return array


def _parameterize(points: np.ndarray, method: str) -> np.ndarray:
    """Curve parameters for data points: ``"uniform"`` or chord length."""
    count = len(points)
    if count == 0:
        return np.zeros(0)
    uniform = np.linspace(0.0, 1.0, count) if count > 1 else np.zeros(1)
    if method == "uniform":
        return uniform
    chords = np.linalg.norm(np.diff(points, axis=0), axis=1)
    total = float(chords.sum())
    if total == 0.0:
        return uniform
    params = np.zeros(count)
    params[1:-1] = np.cumsum(chords)[:-1] / total
    params[0] = 0.0
    params[-1] = 1.0
    return params


def _interpolation_knots(params: np.ndarray, degree: int) -> np.ndarray:
    """Knot vector built by averaging consecutive parameter values."""
    count = len(params)
    knots = np.zeros(count + degree + 1)
    knots[-(degree + 1):] = 1.0
    if count > degree + 1:
        for j in range(1, count - degree):
            knots[j + degree] = float(np.sum(params[j:j + degree])) / degree
    return knots


def _check_fit_inputs(data_points, degree: int) -> np.ndarray:
    if len(data_points) == 0:
        raise ValueError("empty data_points")
    if degree < 1:
        raise ValueError("degree must be >0")
    points = _as_points(data_points)
    if len(points) < degree + 1:
        raise ValueError("need at least degree+1 data points")
    return points


class BSpline:
    """A B-spline curve over the parameter interval [0, 1]."""

    def __init__(self, control_points, degree: int, knots: Sequence[float] | None = None):
        points = _as_points(control_points)
        if degree < 1:
            raise ValueError("degree must be > 0")
        if len(points) < degree + 1:
            raise ValueError("insufficient control points for degree")
        if knots is None:
            knot_vector = clamped_knots(len(points), degree)
        else:
            knot_vector = np.array(knots, dtype=float)
            if len(knot_vector) != len(points) + degree + 1:
                raise ValueError("knot vector size mismatch")
            if knot_vector[0] != 0.0 or knot_vector[-1] != 1.0:
                raise ValueError("knot vector must be clamped to [0,1]")
        self._points = points
        self._degree = int(degree)
        self._knots = knot_vector

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def knots(self) -> np.ndarray:
        return self._knots.copy()

    @property
    def control_points(self) -> np.ndarray:
        return self._points.copy()

    def find_span(self, u: float) -> int:
        """Index of the knot span containing ``u``."""
        knots = self._knots
        last = len(self._points) - 1
        if u >= 1.0:
            return last
        if u <= 0.0:
            return self._degree
        low, high = self._degree, last
        mid = (low + high) // 2
        iterations = 0
        while not (knots[mid] <= u < knots[mid + 1]):
            iterations += 1
            if iterations >= _MAX_SPAN_ITERATIONS:
                break
            if u < knots[mid]:
                if mid == 0:
                    break
                high = mid - 1
            else:
                low = mid + 1
            mid = (low + high) // 2
        if iterations == _MAX_SPAN_ITERATIONS:
            raise RuntimeError("find_span max iterations")
        return mid

    def basis_function(self, u: float) -> np.ndarray:
        """The ``degree + 1`` non-zero basis values at ``u``."""
        span = self.find_span(u)
        p = self._degree
        knots = self._knots
        values = np.zeros(p + 1)
        left = np.zeros(p + 1)
        right = np.zeros(p + 1)
        values[0] = 1.0
        for j in range(1, p + 1):
            left[j] = u - knots[span + 1 - j]
            right[j] = knots[span + j] - u
            saved = 0.0
            for r in range(j):
                den = right[r + 1] + left[j - r]
                temp = 0.0 if den == 0.0 else values[r] / den
                values[r] = saved + temp * right[r + 1]
                saved = temp * left[j - r]
            values[j] = saved
        return values

    def evaluate(self, u: float) -> np.ndarray:
        """Point on the curve at ``u``, clamped into [0, 1]."""
        u = min(max(u, 0.0), 1.0)
        p = self._degree
        knots = self._knots
        span = self.find_span(u)
        work = self._points[span - p:span + 1].copy()
        for r in range(1, p + 1):
            for j in range(p, r - 1, -1):
                num = u - knots[span - p + j]
                den = knots[span + 1 + j - r] - knots[span - p + j]
                alpha = 0.0 if den == 0.0 else num / den
                work[j] = (1.0 - alpha) * work[j - 1] + alpha * work[j]
        return work[p].copy()

    def _basis_matrix(self, params: np.ndarray) -> np.ndarray:
        columns = len(self._points)
        matrix = np.zeros((len(params), columns))
        for row, u in enumerate(params):
            first = self.find_span(u) - self._degree
            for offset, value in enumerate(self.basis_function(u)):
                column = first + offset
                if column < columns:
                    matrix[row, column] = value
        return matrix

    @classmethod
    def interpolate(cls, data_points, degree: int, parameterization: str = "chord") -> BSpline:
        """Spline passing exactly through ``data_points``."""
        points = _check_fit_inputs(data_points, degree)
        params = _parameterize(points, parameterization)
        knots = _interpolation_knots(params, degree)
        helper = cls(np.repeat(points[:1], len(points), axis=0), degree, knots)
        basis = helper._basis_matrix(params)
        solution = np.linalg.lstsq(basis, points, rcond=None)[0]
        if np.linalg.norm(basis @ solution - points) > _RESIDUAL_TOLERANCE:
            raise RuntimeError("Interpolation solve failed (residual too large)")
        return cls(solution, degree, knots)

    @classmethod
    def smooth_interpolate(
        cls, data_points, degree: int, lam: float, parameterization: str = "chord"
    ) -> BSpline:
        """Penalised least-squares fit; ``lam <= 0`` gives exact interpolation."""
        if lam <= 0.0:
            return cls.interpolate(data_points, degree, parameterization)
        points = _check_fit_inputs(data_points, degree)
        count = len(points)
        params = _parameterize(points, parameterization)

        cp_count = max(degree + 1, min(count, (count + degree) // 2))
        knots = clamped_knots(cp_count, degree)
        helper = cls(np.repeat(points[:1], cp_count, axis=0), degree, knots)
        basis = helper._basis_matrix(params)

        penalty = np.zeros((cp_count, cp_count))
        if cp_count > 3:
            second_diff = np.zeros((cp_count - 2, cp_count))
            for i in range(cp_count - 2):
                second_diff[i, i:i + 3] = (1.0, -2.0, 1.0)
            penalty = second_diff.T @ second_diff

        system = basis.T @ basis + lam * penalty
        rhs = basis.T @ points
        solution = np.linalg.lstsq(system, rhs, rcond=None)[0]
        return cls(solution, degree, knots)