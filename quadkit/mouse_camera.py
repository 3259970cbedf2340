"""A 2D camera whose offset and scale are driven by the mouse."""

from __future__ import annotations

from quadkit.geometry import Vec2

__all__ = ["MouseCamera"]


class MouseCamera:
    """Camera offset and zoom that follow mouse drags and wheel turns."""

    def __init__(self, offset: Vec2 = Vec2(0.0, 0.0), scale: float = 1.0) -> None:
        self.offset = offset
        self.scale = scale
        self._last_mouse_pos = Vec2(0.0, 0.0)

    def __repr__(self) -> str:
        return f"MouseCamera(offset={self.offset!r}, scale={self.scale!r})"

    def scale_wheel(self, center: Vec2, wheel_value: float, scale_factor: float) -> None:
        """Zoom by ``scale_factor`` for a positive wheel value, by its inverse for a negative one."""
        if wheel_value > 0.0:
            self.scale_mul(center, scale_factor)
        elif wheel_value < 0.0:
            self.scale_mul(center, 1.0 / scale_factor)

    def scale_mul(self, center: Vec2, mul_to_scale: float) -> None:
        """Multiply the scale by ``mul_to_scale`` around ``center``."""
        self.scale_new(center, self.scale * mul_to_scale)

    def scale_new(self, center: Vec2, new_scale: float) -> None:
        """Set the scale to ``new_scale``, keeping ``center`` fixed."""
        self.offset = (self.offset - center) * (new_scale / self.scale) + center
        self.scale = new_scale

    def update(self, mouse_pos: Vec2, should_offset: bool) -> None:
        """Record the mouse position; move by its change when ``should_offset``."""
        if should_offset:
            self.offset = self.offset + (mouse_pos - self._last_mouse_pos)
        self._last_mouse_pos = mouse_pos