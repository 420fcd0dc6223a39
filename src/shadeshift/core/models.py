# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Data models for ShadeShift."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    """The two visual modes."""
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @classmethod
    def from_value(cls, value: object) -> Theme | None:
        """Return the member for exactly ``"light"``/``"dark"``, else None."""
        if value == "light":
            return cls.LIGHT
        if value == "dark":
            return cls.DARK
        return None


class Corner(Enum):
    """Screen corner a theme transition radiates from."""
    TOP_RIGHT = "top-right"
    TOP_LEFT = "top-left"
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"


@dataclass(frozen=True)
class ColorTokens:
    """Transition colors for one theme."""
    background: str
    glow_color: str        # rgba() string
    particle_color: str    # rgba() string

    @property
    def particle_shadow(self) -> str:
        """Particle color at half alpha, used for the particle halo."""
        return self.particle_color.replace("0.7", "0.5")


@dataclass(frozen=True)
class RevealCircle:
    """A CSS-style ``circle(<radius>% at <x>% <y>%)`` clip shape."""
    radius_pct: float
    center_x_pct: float
    center_y_pct: float

    def to_css(self) -> str:
        return (
            f"circle({self.radius_pct:g}% at "
            f"{self.center_x_pct:g}% {self.center_y_pct:g}%)"
        )

    def center(self, width: float, height: float) -> tuple[float, float]:
        return width * self.center_x_pct / 100, height * self.center_y_pct / 100

    def radius_px(self, width: float, height: float) -> float:
        # CSS resolves circle() percentages against hypot(w, h) / sqrt(2)
        return self.radius_pct / 100 * math.hypot(width, height) / math.sqrt(2)


@dataclass(frozen=True)
class AnchorOffset:
    """Offset of a box from the two viewport edges meeting at a corner."""
    horizontal_edge: str   # "left" or "right"
    vertical_edge: str     # "top" or "bottom"
    offset: int

    def shifted(self, delta: int) -> AnchorOffset:
        return AnchorOffset(self.horizontal_edge, self.vertical_edge, self.offset + delta)

    def position(self, width: float, height: float, size: float) -> tuple[float, float]:
        """Top-left point of a ``size`` x ``size`` box placed at this offset."""
        if self.horizontal_edge == "left":
            x = self.offset
        else:
            x = width - self.offset - size
        if self.vertical_edge == "top":
            y = self.offset
        else:
            y = height - self.offset - size
        return x, y


@dataclass(frozen=True)
class GeometrySpec:
    """Visual parameters for a transition radiating from one corner."""
    reveal_from: RevealCircle
    reveal_to: RevealCircle
    anchor_offset: AnchorOffset
    particle_offset: AnchorOffset


@dataclass(frozen=True)
class ParticleVector:
    """Trajectory of one radial particle."""
    dx: float
    dy: float
    delay_ms: int
    duration_ms: int


@dataclass
class TransitionState:
    """Mutable theme state shared by the store and the transition controller.

    ``pending_theme`` equals ``committed_theme`` whenever ``animating`` is False.
    """
    committed_theme: Theme
    pending_theme: Theme
    animating: bool = False
    sequence: int = 0

    @classmethod
    def idle(cls, theme: Theme) -> TransitionState:
        return cls(committed_theme=theme, pending_theme=theme)
