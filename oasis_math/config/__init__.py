################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Configuration for OASIS math helpers
"""

from __future__ import annotations

from oasis_math.config.vec3_params import Vec3Params
from oasis_math.config.vec3_params import Vec3ParamsError


__all__ = [
    "Vec3Params",
    "Vec3ParamsError",
]
