"""Comparison policy for floating-point degeneracy checks.

Parallel sides, equal edge lengths and tolerant point comparison all go
through a GeometryConfig. The default is exact equality (abs_tol=0.0);
a looser policy has to be passed in explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeometryConfig(BaseModel):
    """Absolute tolerance used when comparing derived float values."""

    model_config = ConfigDict(frozen=True)

    abs_tol: float = Field(default=0.0, ge=0, description="Absolute tolerance, 0 = exact")

    def is_zero(self, value: float) -> bool:
        if self.abs_tol == 0.0:
            return value == 0.0
        return abs(value) <= self.abs_tol

    def equal(self, a: float, b: float) -> bool:
        if self.abs_tol == 0.0:
            return a == b
        return abs(a - b) <= self.abs_tol


EXACT = GeometryConfig()
