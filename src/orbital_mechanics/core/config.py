from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping

GRAVITATIONAL_CONSTANT = 6.674e-11
DEFAULT_ACCURACY_THRESHOLD = 15.0
DEFAULT_FRAME_INTERVAL = 1.0 / 60.0

ENV_PREFIX = "ORBITAL_"


@dataclass(frozen=True)
class GravityConstants:
    """Physical constants a simulation is built with.

    ``accuracy_threshold`` is a hard distance floor: pairs closer than it
    exert no force on each other at all.
    """

    G: float = GRAVITATIONAL_CONSTANT
    accuracy_threshold: float = DEFAULT_ACCURACY_THRESHOLD

    def __post_init__(self) -> None:
        if not self.G > 0:
            raise ValueError("G must be positive")
        if self.accuracy_threshold < 0:
            raise ValueError("accuracy_threshold must be non-negative")


DEFAULT_CONSTANTS = GravityConstants()


@dataclass(frozen=True)
class SimulationSettings:
    dt: float = 1.0
    constants: GravityConstants = field(default_factory=GravityConstants)
    integrator: str = "symplectic_euler"
    frame_interval: float = DEFAULT_FRAME_INTERVAL

    def __post_init__(self) -> None:
        if not self.dt > 0:
            raise ValueError("dt must be positive")
        if not self.frame_interval > 0:
            raise ValueError("frame_interval must be positive")

    def with_dt(self, dt: float) -> "SimulationSettings":
        return replace(self, dt=float(dt))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        defaults: Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> "SimulationSettings":
        """Build settings from ``ORBITAL_*`` variables.

        Precedence, lowest first: ``defaults`` (e.g. a scenario's preferred
        step), the environment, then keyword ``overrides``.
        """
        env = os.environ if environ is None else environ
        constants_kwargs: dict[str, Any] = {}
        env_kwargs: dict[str, Any] = {}
        _read(env, "G", float, constants_kwargs, "G")
        _read(env, "ACCURACY_THRESHOLD", float, constants_kwargs, "accuracy_threshold")
        _read(env, "DT", float, env_kwargs, "dt")
        _read(env, "INTEGRATOR", str, env_kwargs, "integrator")
        _read(env, "FRAME_INTERVAL", float, env_kwargs, "frame_interval")
        settings_kwargs: dict[str, Any] = dict(defaults or {})
        if constants_kwargs:
            base = settings_kwargs.get("constants", DEFAULT_CONSTANTS)
            settings_kwargs["constants"] = replace(base, **constants_kwargs)
        settings_kwargs.update(env_kwargs)
        settings_kwargs.update(overrides)
        return cls(**settings_kwargs)


def log_level_from_env(environ: Mapping[str, str] | None = None, default: int = logging.WARNING) -> int:
    env = os.environ if environ is None else environ
    name = f"{ENV_PREFIX}LOG_LEVEL"
    raw = env.get(name, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid value for {name}: {raw!r}")
    return level


def _read(
    env: Mapping[str, str],
    suffix: str,
    parse: Callable[[str], Any],
    target: dict[str, Any],
    key: str,
) -> None:
    name = f"{ENV_PREFIX}{suffix}"
    raw = env.get(name)
    if raw is None or not raw.strip():
        return
    try:
        target[key] = parse(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from exc
