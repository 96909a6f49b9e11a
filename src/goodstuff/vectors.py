"""Plain vector value types with component swizzles."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Vector2(BaseModel):
    """Immutable two-component vector."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    def to_vector3(self, z: float = 0.0) -> "Vector3":
        return Vector3(x=self.x, y=self.y, z=z)


class Vector3(BaseModel):
    """Immutable three-component vector."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def xy(self) -> Vector2:
        """Return the x and y components."""

        return Vector2(x=self.x, y=self.y)

    def xz(self) -> Vector2:
        """Return the x and z components."""

        return Vector2(x=self.x, y=self.z)

    def yz(self) -> Vector2:
        """Return the y and z components."""

        return Vector2(x=self.y, y=self.z)


__all__ = ["Vector2", "Vector3"]
