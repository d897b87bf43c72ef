from __future__ import annotations

from dataclasses import dataclass, field

from PySide6 import QtWidgets

from ...core.model import BodyState

Color = tuple[float, float, float]


@dataclass
class DisplayOptions:
    body_scale: float = 10.0
    colors: dict[str, Color] = field(default_factory=dict)
    default_color: Color = (1.0, 1.0, 1.0)

    def color_for(self, body_id: str) -> Color:
        return self.colors.get(body_id, self.default_color)


class Renderer(QtWidgets.QWidget):
    def set_scene(self, states: tuple[BodyState, ...], display: DisplayOptions) -> None:
        raise NotImplementedError

    def set_view_range(self, view_range: tuple[float, float, float, float]) -> None:
        _ = view_range

    def clear(self) -> None:
        raise NotImplementedError
