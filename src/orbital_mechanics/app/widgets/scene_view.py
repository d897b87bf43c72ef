from __future__ import annotations

from typing import List

import pyqtgraph as pg
from PySide6 import QtCore, QtGui, QtWidgets

from ...core.model import BodyState
from ...core.physics import body_quad
from ..rendering.base import Color, DisplayOptions, Renderer


def _qcolor(color: Color) -> QtGui.QColor:
    r, g, b = (max(0, min(255, int(round(channel * 255)))) for channel in color)
    return QtGui.QColor(r, g, b)


class SceneView(Renderer):
    """Orthographic 2D view; each body is a square placed by its world matrix."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._plot = pg.PlotWidget(background="k")
        self._plot.setAspectLocked(True)
        self._plot.showGrid(x=True, y=True, alpha=0.15)
        self._plot.setLabel("bottom", "X")
        self._plot.setLabel("left", "Y")

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._plot)

        self._quads: List[QtWidgets.QGraphicsPolygonItem] = []

    def set_view_range(self, view_range: tuple[float, float, float, float]) -> None:
        x_min, x_max, y_min, y_max = view_range
        self._plot.setXRange(x_min, x_max, padding=0.0)
        self._plot.setYRange(y_min, y_max, padding=0.0)

    def set_scene(self, states: tuple[BodyState, ...], display: DisplayOptions) -> None:
        self._ensure_quad_count(len(states))
        for item, state in zip(self._quads, states):
            corners = body_quad(state.position, display.body_scale)
            polygon = QtGui.QPolygonF([QtCore.QPointF(float(x), float(y)) for x, y in corners])
            item.setPolygon(polygon)
            color = _qcolor(display.color_for(state.body_id))
            item.setBrush(pg.mkBrush(color))
            item.setPen(pg.mkPen(color))

    def clear(self) -> None:
        self._ensure_quad_count(0)

    def _ensure_quad_count(self, count: int) -> None:
        while len(self._quads) > count:
            self._plot.removeItem(self._quads.pop())
        while len(self._quads) < count:
            item = QtWidgets.QGraphicsPolygonItem()
            self._plot.addItem(item)
            self._quads.append(item)
