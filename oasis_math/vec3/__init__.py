################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""3-vector operations and flat buffer traversal."""

from __future__ import annotations

from oasis_math.vec3.buffer_iteration import BufferIteration
from oasis_math.vec3.buffer_iteration import BufferIterationError
from oasis_math.vec3.buffer_iteration import Vec3Scratch
from oasis_math.vec3.vec3_ops import ReadableVector3
from oasis_math.vec3.vec3_ops import Vec3Ops
from oasis_math.vec3.vec3_ops import Vector3


__all__ = [
    "BufferIteration",
    "BufferIterationError",
    "ReadableVector3",
    "Vec3Ops",
    "Vec3Scratch",
    "Vector3",
]
