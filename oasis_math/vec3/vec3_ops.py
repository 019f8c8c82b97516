################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Allocation-free 3D vector operations with output parameters."""

from __future__ import annotations

import math
from typing import List
from typing import Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.vec3_params import FORMAT_PRECISION


# A mutable 3-vector backed by a list or a float32 buffer
Vector3 = Union[List[float], NDArray[np.float32]]

# Any indexable 3-vector, read only
ReadableVector3 = Sequence[float]


def _ieee_passthrough() -> np.errstate:
    """Return a context that lets numpy scalars produce inf/nan silently."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 results instead of ZeroDivisionError."""
    with _ieee_passthrough():
        return float(np.divide(numerator, denominator))


def _clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a scalar to [lower, upper], propagating NaN."""
    return float(np.clip(value, lower, upper))


class Vec3Ops:
    """Stateless operations on 3-vectors.

    Mutating operations write into a caller-supplied ``out`` vector and
    return it, so calls can be chained without allocating. ``out`` may be
    the same storage as any input: every operation reads all of its input
    components before writing the first output component.

    Numeric edge cases are passed through rather than rejected. Dividing by
    a zero component or normalizing a zero vector yields ``inf``/``nan``.
    """

    # --------------------------------------------------------------------
    # Construction and component access
    # --------------------------------------------------------------------

    @staticmethod
    def create() -> Vector3:
        """Return a new zero vector."""
        return Vec3Ops.of(0.0, 0.0, 0.0)

    @staticmethod
    def of(x: float, y: float, z: float) -> Vector3:
        """Return a new vector with the given components."""
        return [x, y, z]

    @staticmethod
    def from_sequence(source: ReadableVector3) -> Vector3:
        """Return a new vector copied from a 3-element sequence."""
        return Vec3Ops.of(source[0], source[1], source[2])

    @staticmethod
    def create_buffer() -> Vector3:
        """Return a new zero vector backed by a float32 buffer."""
        return np.zeros(3, dtype=np.float32)

    @staticmethod
    def buffer_of(x: float, y: float, z: float) -> Vector3:
        """Return a new float32-backed vector with the given components."""
        return np.array([x, y, z], dtype=np.float32)

    @staticmethod
    def set(out: Vector3, x: float, y: float, z: float) -> Vector3:
        out[0] = x
        out[1] = y
        out[2] = z
        return out

    @staticmethod
    def copy(out: Vector3, source: ReadableVector3) -> Vector3:
        return Vec3Ops.set(out, source[0], source[1], source[2])

    # --------------------------------------------------------------------
    # Component-wise arithmetic
    # --------------------------------------------------------------------

    @staticmethod
    def add(out: Vector3, a: ReadableVector3, b: ReadableVector3) -> Vector3:
        """Write a + b into out."""
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        return Vec3Ops.set(out, ax + bx, ay + by, az + bz)

    @staticmethod
    def sub(out: Vector3, a: ReadableVector3, b: ReadableVector3) -> Vector3:
        """Write a - b into out."""
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        return Vec3Ops.set(out, ax - bx, ay - by, az - bz)

    @staticmethod
    def mul(out: Vector3, a: ReadableVector3, b: ReadableVector3) -> Vector3:
        """Write the component-wise product of a and b into out."""
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        with _ieee_passthrough():
            return Vec3Ops.set(out, ax * bx, ay * by, az * bz)

    @staticmethod
    def div(out: Vector3, a: ReadableVector3, b: ReadableVector3) -> Vector3:
        """Write the component-wise quotient of a and b into out.

        Zero components in ``b`` are not checked. The result follows
        IEEE-754: ``1/0`` is ``inf``, ``-1/0`` is ``-inf`` and ``0/0`` is
        ``nan``.
        """
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        return Vec3Ops.set(
            out,
            _ieee_divide(ax, bx),
            _ieee_divide(ay, by),
            _ieee_divide(az, bz),
        )

    # --------------------------------------------------------------------
    # Geometric scalars
    # --------------------------------------------------------------------

    @staticmethod
    def dot(a: ReadableVector3, b: ReadableVector3) -> float:
        """Return the dot product of two vectors."""
        return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]

    @staticmethod
    def length(vector: ReadableVector3) -> float:
        """Return the Euclidean norm without intermediate overflow."""
        return math.hypot(vector[0], vector[1], vector[2])

    @staticmethod
    def length_sq(vector: ReadableVector3) -> float:
        """Return the squared Euclidean norm."""
        x: float = vector[0]
        y: float = vector[1]
        z: float = vector[2]
        with _ieee_passthrough():
            return x * x + y * y + z * z

    @staticmethod
    def angle(a: ReadableVector3, b: ReadableVector3) -> float:
        """Return the angle between two vectors in radians.

        If either vector has zero length the cosine is taken as 0, so the
        result is a right angle. The cosine is clamped to [-1, 1] to absorb
        round-off before ``acos``.
        """
        mag: float = Vec3Ops.length(a) * Vec3Ops.length(b)
        cosine: float = Vec3Ops.dot(a, b) / mag if mag else 0.0
        return math.acos(_clamp(cosine, -1.0, 1.0))

    # --------------------------------------------------------------------
    # Scaling, normalization and interpolation
    # --------------------------------------------------------------------

    @staticmethod
    def scale(out: Vector3, vector: ReadableVector3, scale: float) -> Vector3:
        """Write vector * scale into out."""
        x, y, z = vector[0], vector[1], vector[2]
        with _ieee_passthrough():
            return Vec3Ops.set(out, x * scale, y * scale, z * scale)

    @staticmethod
    def normalize(out: Vector3, vector: ReadableVector3) -> Vector3:
        """Write the unit vector in the direction of ``vector`` into out.

        The zero vector is not special-cased: its scale factor is
        ``1/sqrt(0) = inf`` and ``0 * inf`` is ``nan``, so the result is
        ``(nan, nan, nan)``. A NaN squared length scales by 0 instead.
        """
        r: float = Vec3Ops.length_sq(vector)
        factor: float = _ieee_divide(1.0, math.sqrt(r)) if r >= 0.0 else 0.0
        return Vec3Ops.scale(out, vector, factor)

    @staticmethod
    def linear(
        out: Vector3, a: ReadableVector3, b: ReadableVector3, t: float
    ) -> Vector3:
        """Write the linear interpolation a + (b - a) * t into out.

        ``t`` is not restricted to [0, 1]; values outside extrapolate.
        """
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        return Vec3Ops.set(
            out,
            ax + (bx - ax) * t,
            ay + (by - ay) * t,
            az + (bz - az) * t,
        )

    @staticmethod
    def quadratic(
        out: Vector3,
        a: ReadableVector3,
        c: ReadableVector3,
        d: ReadableVector3,
        t: float,
    ) -> Vector3:
        """Write the quadratic Bezier point from a to d via control c."""
        inv: float = 1.0 - t
        wa: float = inv * inv
        wc: float = 2.0 * inv * t
        wd: float = t * t
        ax, ay, az = a[0], a[1], a[2]
        cx, cy, cz = c[0], c[1], c[2]
        dx, dy, dz = d[0], d[1], d[2]
        return Vec3Ops.set(
            out,
            ax * wa + cx * wc + dx * wd,
            ay * wa + cy * wc + dy * wd,
            az * wa + cz * wc + dz * wd,
        )

    @staticmethod
    def cubic(
        out: Vector3,
        a: ReadableVector3,
        b: ReadableVector3,
        c: ReadableVector3,
        d: ReadableVector3,
        t: float,
    ) -> Vector3:
        """Write the cubic Bezier point from a to d via controls b and c."""
        inv: float = 1.0 - t
        wa: float = inv * inv * inv
        wb: float = 3.0 * inv * inv * t
        wc: float = 3.0 * inv * t * t
        wd: float = t * t * t
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        cx, cy, cz = c[0], c[1], c[2]
        dx, dy, dz = d[0], d[1], d[2]
        return Vec3Ops.set(
            out,
            ax * wa + bx * wb + cx * wc + dx * wd,
            ay * wa + by * wb + cy * wc + dy * wd,
            az * wa + bz * wb + cz * wc + dz * wd,
        )

    @staticmethod
    def cross(out: Vector3, a: ReadableVector3, b: ReadableVector3) -> Vector3:
        """Write the cross product a x b into out."""
        ax, ay, az = a[0], a[1], a[2]
        bx, by, bz = b[0], b[1], b[2]
        return Vec3Ops.set(
            out,
            ay * bz - by * az,
            az * bx - bz * ax,
            ax * by - bx * ay,
        )

    # --------------------------------------------------------------------
    # Clamping
    # --------------------------------------------------------------------

    @staticmethod
    def clamp(
        out: Vector3, vector: ReadableVector3, lower: float, upper: float
    ) -> Vector3:
        """Clamp each component to [lower, upper], keeping component order."""
        x, y, z = vector[0], vector[1], vector[2]
        return Vec3Ops.set(
            out,
            _clamp(x, lower, upper),
            _clamp(y, lower, upper),
            _clamp(z, lower, upper),
        )

    @staticmethod
    def clamp_rotated(
        out: Vector3, vector: ReadableVector3, lower: float, upper: float
    ) -> Vector3:
        """Clamp components and store them rotated as (y, z, x).

        Kept for parity with data produced by the legacy clamp, which wrote
        the clamped y, z and x components into slots 0, 1 and 2. New code
        should use :meth:`clamp`.
        """
        x, y, z = vector[0], vector[1], vector[2]
        return Vec3Ops.set(
            out,
            _clamp(y, lower, upper),
            _clamp(z, lower, upper),
            _clamp(x, lower, upper),
        )

    # --------------------------------------------------------------------
    # Comparison and formatting
    # --------------------------------------------------------------------

    @staticmethod
    def equals(
        a: ReadableVector3, b: ReadableVector3, abs_tol: float = 0.0
    ) -> bool:
        """Return True if all components differ by at most ``abs_tol``."""
        return (
            abs(a[0] - b[0]) <= abs_tol
            and abs(a[1] - b[1]) <= abs_tol
            and abs(a[2] - b[2]) <= abs_tol
        )

    @staticmethod
    def to_string(vector: ReadableVector3, precision: int = FORMAT_PRECISION) -> str:
        """Return ``"(x, y, z)"`` with fixed decimals, for display only.

        Negative zero prints as ``0.00``. Exact decimal ties round half to
        even, so ``0.125`` prints as ``0.12``.
        """
        # Adding 0.0 turns -0.0 into 0.0 and leaves other values unchanged
        x: float = float(vector[0]) + 0.0
        y: float = float(vector[1]) + 0.0
        z: float = float(vector[2]) + 0.0
        return f"({x:.{precision}f}, {y:.{precision}f}, {z:.{precision}f})"
