from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from PySide6 import QtWidgets

from ..core.config import log_level_from_env
from ..core.scenarios import load_builtin_scenarios, scenario_registry
from .window import MainWindow

_LOG = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(prog="orbital-mechanics", description="2D gravitational N-body viewer")
    parser.add_argument("--scenario", help="id of the scenario to open first")
    parser.add_argument("--list-scenarios", action="store_true", help="print the built-in scenario ids and exit")
    args, qt_args = parser.parse_known_args(argv)
    load_builtin_scenarios()
    if args.scenario is not None and args.scenario not in scenario_registry:
        known = ", ".join(scenario.scenario_id for scenario in scenario_registry.all())
        parser.error(f"unknown scenario {args.scenario!r} (known: {known})")
    return args, qt_args


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=log_level_from_env(),
        format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
    )
    args, qt_args = _parse_args(argv)
    if args.list_scenarios:
        for scenario in scenario_registry.all():
            print(f"{scenario.scenario_id}\t{scenario.name}")
        return 0

    _LOG.info("Starting viewer with scenario %s", args.scenario or "<default>")
    app = QtWidgets.QApplication([sys.argv[0], *qt_args])
    window = MainWindow(initial_scenario=args.scenario)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
