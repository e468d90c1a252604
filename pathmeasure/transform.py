"""Affine transforms applied to paths."""

import math

from pydantic import BaseModel

from pathmeasure.types import Point


class AffineTransform(BaseModel):
    """2D affine transform mapping (x, y) to (a*x + c*y + tx, b*x + d*y + ty)."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(tx=tx, ty=ty)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """Rotation by angle radians about the origin."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    @property
    def is_translation_only(self) -> bool:
        """True for a non-zero pure translation.

        The identity is not a translation: it moves nothing, but callers
        treat any non-translation as requiring a rebuild.
        """
        linear_is_identity = (self.a, self.b, self.c, self.d) == (1.0, 0.0, 0.0, 1.0)
        return linear_is_identity and (self.tx != 0 or self.ty != 0)

    def apply(self, point: Point) -> Point:
        """Transform a single point."""
        return Point(
            x=self.a * point.x + self.c * point.y + self.tx,
            y=self.b * point.x + self.d * point.y + self.ty,
        )
