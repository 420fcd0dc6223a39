# Copyright (c) 2026 Nate Tritle. Licensed under the MIT License.
"""Full-window overlay painting the theme transition.

While a transition runs, draws (in the incoming theme's colors) a circle that
grows from the configured corner to cover the window, a glow burst just outside
that corner, and a ring of particles flying out of it. It holds no theme state;
everything comes from the store's geometry and color tokens.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QEasingCurve, QEvent, QObject, QPointF, Qt, QVariantAnimation
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QPaintEvent, QRadialGradient
from PyQt6.QtWidgets import QWidget

from shadeshift.core.constants import GLOW_SIZE, IDLE_DELAY_MS, PARTICLE_SIZE
from shadeshift.core.models import Theme
from shadeshift.theme.geometry import particle_vectors
from shadeshift.theme.store import ThemeStore
from shadeshift.ui.theme_registry import color_tokens, parse_rgba
from shadeshift.utils.error_handler import safe_slot

logger = logging.getLogger("shadeshift.ui.overlay")


def _rgba_color(value: str) -> QColor:
    r, g, b, a = parse_rgba(value)
    return QColor(r, g, b, int(a * 255))


def _keyframes(values: tuple[float, ...], t: float) -> float:
    """Piecewise-linear interpolation over evenly spaced keyframes."""
    if t <= 0:
        return values[0]
    if t >= 1:
        return values[-1]
    segments = len(values) - 1
    pos = t * segments
    i = int(pos)
    frac = pos - i
    return values[i] + (values[i + 1] - values[i]) * frac


def _reveal_curve() -> QEasingCurve:
    curve = QEasingCurve(QEasingCurve.Type.BezierSpline)
    curve.addCubicBezierSegment(QPointF(0.32, 0.72), QPointF(0.0, 1.0), QPointF(1.0, 1.0))
    return curve


class TransitionOverlay(QWidget):
    """Click-through overlay shown between transition start and finish."""

    def __init__(self, root: QWidget, store: ThemeStore, duration_ms: int = IDLE_DELAY_MS) -> None:
        super().__init__(root)
        self._store = store
        self._duration_ms = duration_ms
        self._colors = store.colors
        self._geometry = store.geometry
        self._particles = particle_vectors()
        self._elapsed_ms = 0

        self._reveal_easing = _reveal_curve()
        self._ease_out = QEasingCurve(QEasingCurve.Type.OutQuad)

        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self._animation = QVariantAnimation(self)
        self._animation.setDuration(duration_ms)
        self._animation.setStartValue(0)
        self._animation.setEndValue(duration_ms)
        self._animation.valueChanged.connect(self._on_tick)

        store.transition.transition_started.connect(self._on_started)
        store.transition.transition_finished.connect(self._on_finished)
        root.installEventFilter(self)
        self.setGeometry(root.rect())
        self.hide()

    @property
    def elapsed_ms(self) -> int:
        return self._elapsed_ms

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.parent() and event.type() == QEvent.Type.Resize:
            self.setGeometry(obj.rect())
        return super().eventFilter(obj, event)

    def _on_started(self, theme: Theme) -> None:
        self._colors = color_tokens(theme)
        self._geometry = self._store.geometry
        self._elapsed_ms = 0
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())
        self.show()
        self.raise_()
        self._animation.stop()
        self._animation.start()

    def _on_finished(self) -> None:
        self._animation.stop()
        self.hide()

    @safe_slot(notify=False)
    def _on_tick(self, value: int) -> None:
        self._elapsed_ms = int(value)
        self.update()

    @safe_slot(notify=False)
    def paintEvent(self, event: QPaintEvent) -> None:
        w, h = float(self.width()), float(self.height())
        t = min(1.0, self._elapsed_ms / self._duration_ms) if self._duration_ms else 1.0
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        try:
            self._paint_reveal(painter, w, h, t)
            self._paint_glow(painter, w, h, t)
            self._paint_particles(painter, w, h)
        finally:
            painter.end()

    def _paint_reveal(self, painter: QPainter, w: float, h: float, t: float) -> None:
        g = self._geometry
        eased = self._reveal_easing.valueForProgress(t)
        start = g.reveal_from.radius_px(w, h)
        radius = start + (g.reveal_to.radius_px(w, h) - start) * eased
        cx, cy = g.reveal_to.center(w, h)
        path = QPainterPath()
        path.addEllipse(QPointF(cx, cy), radius, radius)
        painter.setOpacity(1.0)
        painter.fillPath(path, QColor(self._colors.background))

    def _paint_glow(self, painter: QPainter, w: float, h: float, t: float) -> None:
        eased = self._ease_out.valueForProgress(t)
        opacity = _keyframes((0.0, 0.8, 0.0), eased)
        scale = _keyframes((0.8, 1.5, 2.0), eased)
        if opacity <= 0:
            return
        x, y = self._geometry.anchor_offset.position(w, h, GLOW_SIZE)
        center = QPointF(x + GLOW_SIZE / 2, y + GLOW_SIZE / 2)
        radius = GLOW_SIZE / 2 * scale
        color = _rgba_color(self._colors.glow_color)
        clear = QColor(color)
        clear.setAlpha(0)
        gradient = QRadialGradient(center, radius)
        gradient.setColorAt(0.0, color)
        gradient.setColorAt(0.7, clear)
        painter.setOpacity(opacity)
        painter.setBrush(gradient)
        painter.drawEllipse(center, radius, radius)

    def _paint_particles(self, painter: QPainter, w: float, h: float) -> None:
        x, y = self._geometry.particle_offset.position(w, h, PARTICLE_SIZE)
        origin = QPointF(x + PARTICLE_SIZE / 2, y + PARTICLE_SIZE / 2)
        color = _rgba_color(self._colors.particle_color)
        halo = _rgba_color(self._colors.particle_shadow)
        for vector in self._particles:
            local = (self._elapsed_ms - vector.delay_ms) / vector.duration_ms
            if local <= 0 or local >= 1:
                continue
            eased = self._ease_out.valueForProgress(local)
            scale = _keyframes((0.0, 1.2, 0.0), eased)
            painter.setOpacity(_keyframes((0.0, 1.0, 0.0), eased))
            center = QPointF(origin.x() + vector.dx * eased, origin.y() + vector.dy * eased)
            radius = PARTICLE_SIZE / 2 * scale
            halo_gradient = QRadialGradient(center, radius + 15)
            halo_gradient.setColorAt(0.0, halo)
            halo_gradient.setColorAt(1.0, QColor(0, 0, 0, 0))
            painter.setBrush(halo_gradient)
            painter.drawEllipse(center, radius + 15, radius + 15)
            painter.setBrush(color)
            painter.drawEllipse(center, radius, radius)
