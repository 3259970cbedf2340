"""Sprite-sheet animations: one animation per row, one frame per tile."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from quadkit.geometry import Rect, Vec2

__all__ = ["Animation", "AnimationFrame", "AnimatedSprite"]


@dataclass(frozen=True)
class Animation:
    """An animation occupying ``frames`` tiles of row ``row``, played at ``fps``."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass(frozen=True)
class AnimationFrame:
    """Where the current frame lies in the source image and how big it is."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """All animations of one sprite sheet and the playback position."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool = True,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def _animation(self) -> Animation:
        return self._animations[self._current]

    def set_animation(self, animation: int) -> None:
        """Switch animation; the frame number is kept, wrapped to the new length."""
        if not 0 <= animation < len(self._animations):
            raise IndexError(f"no animation with index {animation}")
        self._current = animation
        self._frame %= self._animation().frames

    def current_animation(self) -> int:
        """Index of the animation being shown."""
        return self._current

    def set_frame(self, frame: int) -> None:
        """Jump to a specific frame of the current animation."""
        self._frame = frame

    def is_last_frame(self) -> bool:
        """Whether the last frame of the current animation is shown."""
        return self._frame == self._animation().frames - 1

    def update(self, frame_time: float) -> None:
        """Advance by ``frame_time`` seconds, stepping a frame every 1/fps seconds."""
        animation = self._animation()
        if self.playing:
            self._time += frame_time
            threshold = 1.0 / animation.fps if animation.fps else math.inf
            if self._time > threshold:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The current frame's area in the sheet and its size."""
        animation = self._animation()
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )