################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Windowed traversal of flat buffers as interleaved 3-vector streams."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Callable
from typing import MutableSequence
from typing import Optional
from typing import Sequence

from oasis_math.config.vec3_params import TRAVERSAL_MIN_MAP_STRIDE
from oasis_math.config.vec3_params import VECTOR_SIZE
from oasis_math.config.vec3_params import Vec3Params
from oasis_math.config.vec3_params import Vec3ParamsError
from oasis_math.vec3.vec3_ops import ReadableVector3
from oasis_math.vec3.vec3_ops import Vec3Ops
from oasis_math.vec3.vec3_ops import Vector3


_LOG: logging.Logger = logging.getLogger(__name__)


# Callback for each(): (vector, source, index) -> None
VisitFn = Callable[[ReadableVector3, Sequence[float], int], None]

# Callback for map(): (vector, out, source, index) -> 3-vector
MapFn = Callable[[ReadableVector3, Vector3, Sequence[float], int], ReadableVector3]


class BufferIterationError(ValueError):
    """Raised when buffer traversal arguments are invalid."""


@dataclass
class Vec3Scratch:
    """Reusable staging vectors for buffer traversal.

    The vectors are overwritten on every window. Their contents are only
    valid inside the callback invocation that received them, and one
    scratch pair must not be shared by traversals running at the same time.

    Attributes:
        vector: Receives the components of the current window
        out: Handed to map callbacks as their output vector
    """

    vector: Vector3 = field(default_factory=Vec3Ops.create)
    out: Vector3 = field(default_factory=Vec3Ops.create)


def _log_partial_window(length: int, stride: int, offset: int) -> None:
    """Log when the last window would read past the buffer end."""
    if offset >= length:
        return
    last_index: int = offset + ((length - 1 - offset) // stride) * stride
    if last_index + VECTOR_SIZE > length:
        _LOG.debug(
            "Buffer of length %d leaves a partial window for stride %d, offset %d",
            length,
            stride,
            offset,
        )


class BufferIteration:
    """Traverse flat numeric buffers in fixed-size vector windows.

    Windows start at ``offset`` and advance by ``stride`` while the start
    index is inside the buffer. Each window loads three consecutive
    numbers into a scratch vector, so no allocation happens per window.

    Scratch storage is either passed in explicitly or created once per
    call, so nested and concurrent traversals do not interfere unless they
    share the same :class:`Vec3Scratch`.

    Buffer lengths are not validated. A trailing window that runs past the
    end of ``source`` raises whatever the sequence raises for the
    out-of-range read (``IndexError`` for lists and numpy arrays).
    """

    def __init__(self, params: Optional[Vec3Params] = None) -> None:
        """Initialize traversal defaults and validate them."""
        self._params: Vec3Params = params or Vec3Params.defaults()
        try:
            self._params.validate()
        except Vec3ParamsError as exc:
            raise BufferIterationError(str(exc)) from exc

    @property
    def params(self) -> Vec3Params:
        """Return the traversal defaults."""
        return self._params

    def each(
        self,
        source: Sequence[float],
        visit: VisitFn,
        stride: Optional[int] = None,
        offset: Optional[int] = None,
        scratch: Optional[Vec3Scratch] = None,
    ) -> None:
        """Call ``visit(vector, source, index)`` for every window.

        ``vector`` is scratch storage holding ``source[index:index + 3]``.
        ``source`` is passed through uncopied.
        """
        step: int = self._params.stride if stride is None else stride
        start: int = self._params.offset if offset is None else offset
        if step <= 0:
            raise BufferIterationError("each's stride must be positive.")

        staging: Vec3Scratch = scratch or Vec3Scratch()
        length: int = len(source)
        _log_partial_window(length, step, start)

        for index in range(start, length, step):
            Vec3Ops.set(
                staging.vector, source[index], source[index + 1], source[index + 2]
            )
            visit(staging.vector, source, index)

    def map(
        self,
        source: MutableSequence[float],
        map_fn: MapFn,
        stride: Optional[int] = None,
        offset: Optional[int] = None,
        clone: Optional[bool] = None,
        scratch: Optional[Vec3Scratch] = None,
    ) -> MutableSequence[float]:
        """Replace every window with the vector returned by ``map_fn``.

        ``map_fn(vector, out, source, index)`` receives the window in
        ``vector`` and a scratch ``out`` vector it may fill and return. The
        returned components are written to ``result[index:index + 3]``.

        The result is a shallow copy of ``source`` when cloning, otherwise
        ``source`` itself is mutated and returned.

        Raises:
            BufferIterationError: if ``stride`` is below 3 or ``offset`` is
                negative. Nothing is copied or written in that case.
        """
        step: int = self._params.stride if stride is None else stride
        start: int = self._params.offset if offset is None else offset
        make_copy: bool = self._params.clone if clone is None else clone

        if step < TRAVERSAL_MIN_MAP_STRIDE:
            _LOG.info(
                "Rejecting buffer map, stride %d is below %d",
                step,
                TRAVERSAL_MIN_MAP_STRIDE,
            )
            raise BufferIterationError(
                f"map's stride can not be lower than {TRAVERSAL_MIN_MAP_STRIDE}."
            )
        if start < 0:
            _LOG.info("Rejecting buffer map, offset %d is negative", start)
            raise BufferIterationError("map's offset can not be lower than 0.")

        result: MutableSequence[float] = copy.copy(source) if make_copy else source

        staging: Vec3Scratch = scratch or Vec3Scratch()
        length: int = len(source)
        _log_partial_window(length, step, start)

        for index in range(start, length, step):
            Vec3Ops.set(
                staging.vector, source[index], source[index + 1], source[index + 2]
            )
            mapped: ReadableVector3 = map_fn(staging.vector, staging.out, source, index)
            x, y, z = mapped[0], mapped[1], mapped[2]
            result[index] = x
            result[index + 1] = y
            result[index + 2] = z

        return result
