from __future__ import annotations

from PySide6 import QtWidgets

from ...core.model import Vector2
from ...core.physics import center_of_mass, kinetic_energy, linear_momentum, total_mass
from ...core.sim import Simulation


class DiagnosticsPanel(QtWidgets.QGroupBox):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Diagnostics", parent)
        layout = QtWidgets.QFormLayout(self)

        self._tick = QtWidgets.QLabel("-")
        self._time = QtWidgets.QLabel("-")
        self._total_mass = QtWidgets.QLabel("-")
        self._com = QtWidgets.QLabel("-")
        self._momentum = QtWidgets.QLabel("-")
        self._kinetic = QtWidgets.QLabel("-")

        layout.addRow("Tick", self._tick)
        layout.addRow("Time (s)", self._time)
        layout.addRow("Total Mass", self._total_mass)
        layout.addRow("r_C", self._com)
        layout.addRow("p", self._momentum)
        layout.addRow("KE", self._kinetic)

    def update_values(self, sim: Simulation) -> None:
        self._tick.setText(str(sim.tick))
        self._time.setText(f"{sim.time:.3f}")
        states = sim.snapshot()
        if not states:
            for label in (self._total_mass, self._com, self._momentum, self._kinetic):
                label.setText("-")
            return
        self._total_mass.setText(f"{total_mass(states):.6g}")
        self._com.setText(self._format_vector(center_of_mass(states)))
        self._momentum.setText(self._format_vector(linear_momentum(states)))
        self._kinetic.setText(f"{kinetic_energy(states):.6g}")

    @staticmethod
    def _format_vector(vec: Vector2) -> str:
        return f"[{float(vec.i):.6g}, {float(vec.j):.6g}]"
