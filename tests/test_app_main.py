import pytest

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from orbital_mechanics.app.main import _parse_args  # noqa: E402


def test_scenario_argument_is_validated() -> None:
    args, qt_args = _parse_args(["--scenario", "circular_orbit", "-style", "fusion"])
    assert args.scenario == "circular_orbit"
    assert qt_args == ["-style", "fusion"]
    with pytest.raises(SystemExit):
        _parse_args(["--scenario", "no_such_scenario"])


def test_no_arguments_opens_default_scenario() -> None:
    args, qt_args = _parse_args([])
    assert args.scenario is None
    assert not args.list_scenarios
    assert qt_args == []
