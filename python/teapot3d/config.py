# python/teapot3d/config.py
# Generation configuration parsing utilities for teapot tessellation
# Exists to keep resolution, execution and normal options in one validated structure
# RELEVANT FILES: python/teapot3d/geometry.py, python/teapot3d/_validate.py, tests/test_teapot_config.py
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Tuple, Union

from . import _validate

ConfigSource = Union["TeapotConfig", Mapping[str, Any], str, Path, None]


@dataclass
class TessellationParams:
    rows: int = 16
    cols: int = 16

    def to_dict(self) -> dict:
        return {"rows": self.rows, "cols": self.cols}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["TessellationParams"] = None) -> "TessellationParams":
        base = copy.deepcopy(default) if default is not None else cls()
        if "rows" in data:
            base.rows = _validate._as_int("rows", data["rows"])
        if "cols" in data:
            base.cols = _validate._as_int("cols", data["cols"])
        return base


@dataclass
class ExecutionParams:
    parallel: bool = False
    max_workers: Optional[int] = None

    def to_dict(self) -> dict:
        return {"parallel": self.parallel, "max_workers": self.max_workers}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["ExecutionParams"] = None) -> "ExecutionParams":
        base = copy.deepcopy(default) if default is not None else cls()
        if "parallel" in data:
            base.parallel = bool(data["parallel"])
        if "max_workers" in data:
            value = data["max_workers"]
            base.max_workers = None if value is None else _validate._as_int("max_workers", value)
        return base


@dataclass
class NormalParams:
    renormalize: bool = True

    def to_dict(self) -> dict:
        return {"renormalize": self.renormalize}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["NormalParams"] = None) -> "NormalParams":
        base = copy.deepcopy(default) if default is not None else cls()
        if "renormalize" in data:
            base.renormalize = bool(data["renormalize"])
        return base


@dataclass
class TeapotConfig:
    tessellation: TessellationParams = field(default_factory=TessellationParams)
    execution: ExecutionParams = field(default_factory=ExecutionParams)
    normals: NormalParams = field(default_factory=NormalParams)

    def to_dict(self) -> dict:
        return {
            "tessellation": self.tessellation.to_dict(),
            "execution": self.execution.to_dict(),
            "normals": self.normals.to_dict(),
        }

    def copy(self) -> "TeapotConfig":
        return copy.deepcopy(self)

    def validate(self) -> None:
        _validate.resolution(self.tessellation.rows, self.tessellation.cols)
        if self.execution.max_workers is not None:
            _validate.worker_count(self.execution.max_workers)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], default: Optional["TeapotConfig"] = None) -> "TeapotConfig":
        base = copy.deepcopy(default) if default is not None else cls()
        for key, section in (
            ("tessellation", TessellationParams),
            ("execution", ExecutionParams),
            ("normals", NormalParams),
        ):
            if key not in data:
                continue
            if not isinstance(data[key], Mapping):
                raise TypeError(f"{key} must be a mapping")
            setattr(base, key, section.from_mapping(data[key], getattr(base, key)))
        return base


def _load_from_path(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in {".json", ""}:
        return json.loads(text)
    raise ValueError(f"Unsupported teapot config file format: {path}")


def _build_override_mapping(overrides: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    out: Dict[str, Dict[str, Any]] = {}
    for key, value in overrides.items():
        if key in {"rows", "cols"}:
            out.setdefault("tessellation", {})[key] = value
        elif key == "parallel":
            out.setdefault("execution", {})["parallel"] = value
        elif key in {"max_workers", "workers"}:
            out.setdefault("execution", {})["max_workers"] = value
        elif key in {"renormalize", "renormalize_normals", "unit_normals"}:
            out.setdefault("normals", {})["renormalize"] = value
        else:
            raise TypeError(f"Unknown teapot option: {key!r}")
    return out


def load_teapot_config(config: ConfigSource = None, overrides: Optional[Mapping[str, Any]] = None) -> TeapotConfig:
    if isinstance(config, TeapotConfig):
        cfg = config.copy()
    elif isinstance(config, Mapping):
        cfg = TeapotConfig.from_mapping(config)
    elif isinstance(config, (str, Path)):
        cfg = TeapotConfig.from_mapping(_load_from_path(Path(config)))
    elif config is None:
        cfg = TeapotConfig()
    else:
        raise TypeError("config must be TeapotConfig, mapping, path, or None")

    if overrides:
        merged = _build_override_mapping(overrides)
        if merged:
            cfg = TeapotConfig.from_mapping(merged, cfg)
    cfg.validate()
    return cfg


def split_teapot_overrides(kwargs: MutableMapping[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate recognised generation options from unrelated keyword arguments."""
    recognized = {
        "rows",
        "cols",
        "parallel",
        "max_workers",
        "workers",
        "renormalize",
        "renormalize_normals",
        "unit_normals",
    }
    overrides: Dict[str, Any] = {}
    remaining: Dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in recognized:
            overrides[key] = value
        else:
            remaining[key] = value
    return overrides, remaining
