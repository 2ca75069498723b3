from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

from .engine.board import Side
from .engine.solver import ALGORITHMS
from .engine.zobrist import DEFAULT_SEED

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.breakthrough_solver"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parent / "config" / "defaults.toml"

_SIDES = {"white": Side.WHITE, "black": Side.BLACK}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class SolverConfig:
    rows: int = 4
    columns: int = 4
    seed: int = DEFAULT_SEED
    hash_side_to_move: bool = False
    algorithm: str = "alphabeta"
    first_side: Side = Side.WHITE
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def with_overrides(self, **overrides: Any) -> "SolverConfig":
        """Copy with every non-None override applied, then re-validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        cfg = replace(self, **changes)
        _validate(cfg)
        return cfg


def _read_toml(path: pathlib.Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = {k: dict(v) if isinstance(v, dict) else v for k, v in base.items()}
    for section, values in override.items():
        if isinstance(values, dict) and isinstance(out.get(section), dict):
            out[section].update(values)
        else:
            out[section] = values
    return out


def parse_side(name: str) -> Side:
    try:
        return _SIDES[str(name).lower()]
    except KeyError:
        raise ConfigError(f"unknown side: {name!r} (expected 'white' or 'black')") from None


def _validate(cfg: SolverConfig) -> None:
    if cfg.rows < 2 or cfg.columns < 1:
        raise ConfigError(f"board must be at least 2x1, got {cfg.rows}x{cfg.columns}")
    if cfg.algorithm not in ALGORITHMS:
        raise ConfigError(f"unknown algorithm: {cfg.algorithm!r} (expected one of {', '.join(ALGORITHMS)})")
    if not isinstance(logging.getLevelName(cfg.log_level), int):
        raise ConfigError(f"unknown log level: {cfg.log_level!r}")


def config_from_dict(data: Dict[str, Any]) -> SolverConfig:
    board_cfg = data.get("board", {}) or {}
    hash_cfg = data.get("hashing", {}) or {}
    search_cfg = data.get("search", {}) or {}
    log_cfg = data.get("logging", {}) or {}
    try:
        cfg = SolverConfig(
            rows=int(board_cfg.get("rows", 4)),
            columns=int(board_cfg.get("columns", 4)),
            seed=int(hash_cfg.get("seed", DEFAULT_SEED)),
            hash_side_to_move=bool(hash_cfg.get("side_to_move", False)),
            algorithm=str(search_cfg.get("algorithm", "alphabeta")).lower(),
            first_side=parse_side(search_cfg.get("first_side", "white")),
            log_level=str(log_cfg.get("level", "INFO")).upper(),
        )
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid configuration value: {e}") from e
    _validate(cfg)
    return cfg


def load_config(path: Optional[pathlib.Path | str] = None) -> SolverConfig:
    """Packaged defaults merged with the user file.

    An explicit `path` must exist; the default user file is optional.
    """
    data = _read_toml(DEFAULTS_PATH)
    if path is not None:
        data = _merge(data, _read_toml(pathlib.Path(path)))
    elif CONFIG_PATH.exists():
        data = _merge(data, _read_toml(CONFIG_PATH))
    return config_from_dict(data)
