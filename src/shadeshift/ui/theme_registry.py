# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Consolidated theme system: single source of truth for all color values.

Each ThemePalette defines the site colors used to generate the QSS stylesheet.
Transition overlay colors are kept beside them as ColorTokens.
"""

from __future__ import annotations

from dataclasses import dataclass

from shadeshift.core.models import ColorTokens, Theme


@dataclass(frozen=True)
class ThemePalette:
    """Base color palette that all themed widgets derive from."""
    name: str

    # Site chrome
    bg: str
    text: str
    text_gray: str    # secondary text (captions, status)
    text_hover: str

    # Active navigation item
    active_border: str
    active_bg: str
    active_text: str

    # Cards and admin panels
    admin_bg: str
    admin_card: str
    admin_text: str
    admin_muted: str
    admin_border: str


LIGHT = ThemePalette(
    name="light",
    bg="#e9ebed", text="#1b1d22", text_gray="#6b7280", text_hover="#7c3aed",
    active_border="#a855f7", active_bg="#f3e8ff", active_text="#6b21a8",
    admin_bg="#f4f5f7", admin_card="#ffffff", admin_text="#111827",
    admin_muted="#6b7280", admin_border="#d1d5db",
)

DARK = ThemePalette(
    name="dark",
    bg="#0c0d12", text="#e5e7eb", text_gray="#9ca3af", text_hover="#60a5fa",
    active_border="#3b82f6", active_bg="#172554", active_text="#bfdbfe",
    admin_bg="#111218", admin_card="#181a22", admin_text="#f3f4f6",
    admin_muted="#9ca3af", admin_border="#2a2d38",
)

PALETTES: dict[Theme, ThemePalette] = {
    Theme.LIGHT: LIGHT,
    Theme.DARK: DARK,
}

TRANSITION_COLORS: dict[Theme, ColorTokens] = {
    Theme.DARK: ColorTokens(
        background="#0C0D12",
        glow_color="rgba(59,130,246,0.3)",
        particle_color="rgba(59,130,246,0.7)",
    ),
    Theme.LIGHT: ColorTokens(
        background="#E9EBED",
        glow_color="rgba(168,85,247,0.3)",
        particle_color="rgba(168,85,247,0.7)",
    ),
}


def get_palette(theme: Theme) -> ThemePalette:
    """Get the site palette for a theme."""
    return PALETTES[theme]


def color_tokens(theme: Theme) -> ColorTokens:
    """Get the transition overlay colors for a theme."""
    return TRANSITION_COLORS[theme]


def parse_rgba(value: str) -> tuple[int, int, int, float]:
    """Split an ``rgba(r,g,b,a)`` string into its components."""
    inner = value.strip()
    if not (inner.startswith("rgba(") and inner.endswith(")")):
        raise ValueError(f"Not an rgba() color: {value!r}")
    r, g, b, a = (part.strip() for part in inner[5:-1].split(","))
    return int(r), int(g), int(b), float(a)
