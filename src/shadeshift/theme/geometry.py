# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Static transition geometry per origin corner.

Pure data: a renderer turns these into clip paths and widget positions.
"""

from __future__ import annotations

import math
from types import MappingProxyType

from shadeshift.core.constants import (
    GLOW_OFFSET,
    PARTICLE_COUNT,
    PARTICLE_DISTANCE,
    PARTICLE_DURATION_MS,
    PARTICLE_STAGGER_MS,
    REVEAL_END_PCT,
    REVEAL_START_PCT,
)
from shadeshift.core.models import AnchorOffset, Corner, GeometrySpec, ParticleVector, RevealCircle

# (horizontal edge, vertical edge, center x %, center y %)
_CORNER_EDGES: dict[Corner, tuple[str, str, float, float]] = {
    Corner.TOP_RIGHT: ("right", "top", 100.0, 0.0),
    Corner.TOP_LEFT: ("left", "top", 0.0, 0.0),
    Corner.BOTTOM_RIGHT: ("right", "bottom", 100.0, 100.0),
    Corner.BOTTOM_LEFT: ("left", "bottom", 0.0, 100.0),
}


def _build_spec(corner: Corner) -> GeometrySpec:
    h_edge, v_edge, cx, cy = _CORNER_EDGES[corner]
    glow = AnchorOffset(h_edge, v_edge, GLOW_OFFSET)
    return GeometrySpec(
        reveal_from=RevealCircle(REVEAL_START_PCT, cx, cy),
        reveal_to=RevealCircle(REVEAL_END_PCT, cx, cy),
        anchor_offset=glow,
        # Particles start at the corner itself, i.e. the glow offset pulled back in
        particle_offset=glow.shifted(-GLOW_OFFSET),
    )


GEOMETRY_TABLE = MappingProxyType({corner: _build_spec(corner) for corner in Corner})


def lookup(corner: Corner) -> GeometrySpec:
    """Return the geometry for ``corner``. Total over the Corner enum."""
    return GEOMETRY_TABLE[corner]


def particle_vectors(
    count: int = PARTICLE_COUNT, distance: float = PARTICLE_DISTANCE,
) -> list[ParticleVector]:
    """Evenly spaced radial trajectories, staggered by index."""
    vectors = []
    for i in range(count):
        angle = i / count * math.pi * 2
        vectors.append(ParticleVector(
            dx=math.cos(angle) * distance,
            dy=math.sin(angle) * distance,
            delay_ms=i * PARTICLE_STAGGER_MS,
            duration_ms=PARTICLE_DURATION_MS,
        ))
    return vectors
