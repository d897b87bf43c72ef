from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.physics import is_finite_state
from ..core.scenarios import load_builtin_scenarios, scenario_registry
from ..core.sim import Simulation
from .rendering import DisplayOptions, Renderer2D
from .widgets import DiagnosticsPanel, SimulationPanel

_LOG = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, initial_scenario: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Orbital Mechanics")
        self.resize(1000, 1000)

        load_builtin_scenarios()

        self._renderer = Renderer2D()
        self.setCentralWidget(self._renderer)

        self._simulation_panel = SimulationPanel()
        self._diagnostics = DiagnosticsPanel()
        side_panel = QtWidgets.QWidget()
        side_layout = QtWidgets.QVBoxLayout(side_panel)
        side_layout.addWidget(self._simulation_panel)
        side_layout.addWidget(self._diagnostics)
        side_layout.addStretch(1)
        self._side_dock = QtWidgets.QDockWidget("Simulation", self)
        self._side_dock.setWidget(side_panel)
        self._side_dock.setAllowedAreas(
            QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea
        )
        self.addDockWidget(QtCore.Qt.RightDockWidgetArea, self._side_dock)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._on_tick)

        self._play_action = QtGui.QAction("Play", self)
        self._play_action.setCheckable(True)
        self._play_action.triggered.connect(self._toggle_play)

        self._step_action = QtGui.QAction("Step", self)
        self._step_action.triggered.connect(self._single_step)

        self._reset_action = QtGui.QAction("Reset", self)
        self._reset_action.triggered.connect(self._reset_scenario)

        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        self._scenario_menu = file_menu.addMenu("Scenario")
        self._scenario_group = QtGui.QActionGroup(self)
        self._scenario_group.setExclusive(True)
        self._scenario_actions: dict[str, QtGui.QAction] = {}
        for scenario in scenario_registry.all():
            action = QtGui.QAction(scenario.name, self)
            action.setCheckable(True)
            action.setData(scenario.scenario_id)
            action.triggered.connect(self._on_scenario_action)
            self._scenario_group.addAction(action)
            self._scenario_menu.addAction(action)
            self._scenario_actions[scenario.scenario_id] = action

        edit_menu = menu_bar.addMenu("Simulation")
        edit_menu.addAction(self._play_action)
        edit_menu.addAction(self._step_action)
        edit_menu.addAction(self._reset_action)

        self._simulation_panel.dt_changed.connect(self._on_dt_changed)

        self._simulation: Simulation | None = None
        self._scenario_id: str | None = None
        self._display_options = DisplayOptions()

        scenario_ids = [scenario.scenario_id for scenario in scenario_registry.all()]
        if initial_scenario is None and scenario_ids:
            initial_scenario = scenario_ids[0]
        if initial_scenario is not None:
            self._scenario_actions[initial_scenario].setChecked(True)
            self._set_scenario(initial_scenario)

    def _on_scenario_action(self) -> None:
        action = self.sender()
        if not isinstance(action, QtGui.QAction):
            return
        scenario_id = action.data()
        if scenario_id is None:
            return
        self._set_scenario(str(scenario_id))

    def _set_scenario(self, scenario_id: str) -> None:
        scenario = scenario_registry.get(scenario_id)
        self._scenario_id = scenario_id
        if self._simulation is not None:
            self._simulation.close()
        self._simulation = scenario.create_simulation()
        defaults = scenario.ui_defaults()
        self._display_options = DisplayOptions()
        if defaults is not None:
            self._display_options = DisplayOptions(body_scale=defaults.body_scale, colors=dict(defaults.colors))
            if defaults.view_range:
                self._renderer.set_view_range(defaults.view_range)
        self._simulation_panel.set_settings(self._simulation.dt, self._simulation.settings.integrator)
        self._restart_timer_if_running()
        self._update_ui()

    def _update_ui(self) -> None:
        if self._simulation is None:
            return
        self._renderer.set_scene(self._simulation.snapshot(), self._display_options)
        self._diagnostics.update_values(self._simulation)

    def _toggle_play(self, checked: bool) -> None:
        if self._simulation is None:
            return
        if checked:
            self._play_action.setText("Pause")
            self._restart_timer_if_running(force=True)
        else:
            self._play_action.setText("Play")
            self._timer.stop()

    def _restart_timer_if_running(self, force: bool = False) -> None:
        if self._simulation is None or not (force or self._timer.isActive()):
            return
        interval_ms = int(self._simulation.settings.frame_interval * 1000)
        self._timer.start(max(interval_ms, 1))

    def _pause(self) -> None:
        self._timer.stop()
        self._play_action.setChecked(False)
        self._play_action.setText("Play")

    def _single_step(self) -> None:
        if self._simulation is None:
            return
        if self._timer.isActive():
            return
        self._advance()

    def _on_tick(self) -> None:
        if self._simulation is None:
            return
        self._advance()

    def _advance(self) -> None:
        self._simulation.step()
        if not is_finite_state(self._simulation.bodies):
            _LOG.warning(
                "Scenario %s diverged at tick %d (dt=%s); pausing",
                self._scenario_id,
                self._simulation.tick,
                self._simulation.dt,
            )
            self._pause()
        self._update_ui()

    def _on_dt_changed(self, dt: float) -> None:
        if self._simulation is None:
            return
        self._simulation.settings = self._simulation.settings.with_dt(dt)

    def _reset_scenario(self) -> None:
        if self._scenario_id is None:
            return
        self._set_scenario(self._scenario_id)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._timer.stop()
        if self._simulation is not None:
            self._simulation.close()
        super().closeEvent(event)
