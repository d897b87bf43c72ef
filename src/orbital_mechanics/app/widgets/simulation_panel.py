from __future__ import annotations

from PySide6 import QtCore, QtWidgets


class SimulationPanel(QtWidgets.QGroupBox):
    dt_changed = QtCore.Signal(float)

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Simulation", parent)
        layout = QtWidgets.QFormLayout(self)

        self._dt_spin = QtWidgets.QDoubleSpinBox()
        self._dt_spin.setRange(1e-6, 1e7)
        self._dt_spin.setDecimals(6)
        self._dt_spin.setValue(1.0)

        self._integrator_label = QtWidgets.QLabel("-")

        layout.addRow("dt (s)", self._dt_spin)
        layout.addRow("Integrator", self._integrator_label)

        self._dt_spin.valueChanged.connect(self._emit_dt_changed)

    def set_settings(self, dt: float, integrator: str) -> None:
        self._dt_spin.blockSignals(True)
        self._dt_spin.setValue(float(dt))
        self._dt_spin.blockSignals(False)
        self._integrator_label.setText(integrator)

    def _emit_dt_changed(self) -> None:
        self.dt_changed.emit(float(self._dt_spin.value()))
