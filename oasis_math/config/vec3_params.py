################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Parameter schema for 3-vector traversal and formatting."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Number of components in a vector window
VECTOR_SIZE: int = 3

# Step between consecutive windows in a flat buffer
TRAVERSAL_STRIDE: int = 3
# Smallest stride accepted when mapping a buffer
TRAVERSAL_MIN_MAP_STRIDE: int = VECTOR_SIZE
# Index of the first window in a flat buffer
TRAVERSAL_OFFSET: int = 0
# Map into a copy of the source buffer instead of in place
TRAVERSAL_CLONE: bool = True

# Decimal places used when formatting vectors
FORMAT_PRECISION: int = 2


class Vec3ParamsError(Exception):
    """Raised when vector parameter validation fails."""


def _require_int(value: Any, name: str) -> None:
    """Require an integer value that is not a bool."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise Vec3ParamsError(f"{name} must be an int")


def _require_non_negative_int(value: Any, name: str) -> None:
    """Require a non-negative integer value."""
    _require_int(value, name)
    if value < 0:
        raise Vec3ParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class Vec3Params:
    """Defaults for flat buffer traversal."""

    # Step between consecutive windows in a flat buffer
    stride: int = TRAVERSAL_STRIDE
    # Index of the first window in a flat buffer
    offset: int = TRAVERSAL_OFFSET
    # Map into a copy of the source buffer instead of in place
    clone: bool = TRAVERSAL_CLONE

    @classmethod
    def defaults(cls) -> Vec3Params:
        """Return the default parameters."""
        return cls()

    def validate(self) -> None:
        """Validate parameter invariants.

        The default stride must satisfy the map rule (at least 3) even when
        only each() is used. A stride of 1 or 2 starts a window at one of
        the last two buffer elements, which always reads past the end.
        Pass a smaller stride to each() explicitly for buffers padded with
        trailing elements.
        """
        _require_int(self.stride, "stride")
        if self.stride < TRAVERSAL_MIN_MAP_STRIDE:
            raise Vec3ParamsError(
                f"stride must be at least {TRAVERSAL_MIN_MAP_STRIDE}"
            )
        _require_non_negative_int(self.offset, "offset")
        if not isinstance(self.clone, bool):
            raise Vec3ParamsError("clone must be a bool")

    def replace(self, **overrides: Any) -> Vec3Params:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return a dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}
