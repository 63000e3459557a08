from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from ninny.core.errors import ConfigError

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


# Repo-local config (closest one wins)
DEFAULT_REPO_CONFIG_FILES = (".ninny/config.toml",)

# Global config (applies on this machine)
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/ninny/config.toml",
    "~/.ninny/config.toml",
)


# ================================
# Models (defaults only)
# ================================

RenderFormat = Literal["tree", "plain", "json", "yaml"]


class OutputFormat(str, Enum):
    """Choices for `--format` on the command line."""

    tree = "tree"
    plain = "plain"
    json = "json"
    yaml = "yaml"


class RenderConfig(BaseModel):
    format: RenderFormat = Field(default="tree")
    indent: int = Field(default=4, ge=1, le=16)
    sort_keys: bool = Field(default=True)


class UIConfig(BaseModel):
    show_types: bool = Field(
        default=False, description="Tag leaves with their item kind in tree views."
    )


# ================================
# Loading
# ================================


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _expand_paths(paths: tuple[str, ...]) -> list[Path]:
    return [Path(p).expanduser().resolve() for p in paths]


def find_repo_config(start_dir: Path) -> Optional[Path]:
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_REPO_CONFIG_FILES:
            p = parent / rel
            if p.is_file():
                return p
    return None


def find_global_config() -> Optional[Path]:
    for p in _expand_paths(DEFAULT_GLOBAL_CONFIG_FILES):
        if p.is_file():
            return p
    return None


@dataclass(frozen=True)
class LoadedConfig:
    render: RenderConfig
    ui: UIConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def _section(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    d = merged.get(name) or {}
    return d if isinstance(d, dict) else {}


def load_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults -> global config -> repo config (closest) -> cli_overrides

    cli_overrides uses the TOML shape: {"render": {...}, "ui": {...}}.
    None values are ignored so unset CLI options don't clobber files.
    """
    overrides = {
        k: {kk: vv for kk, vv in v.items() if vv is not None}
        for k, v in (cli_overrides or {}).items()
        if isinstance(v, dict)
    }

    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Any] = {}
    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))
    if repo_path:
        merged = _deep_merge(merged, _read_toml(repo_path))
    merged = _deep_merge(merged, overrides)

    try:
        render = RenderConfig.model_validate(_section(merged, "render"))
        ui = UIConfig.model_validate(_section(merged, "ui"))
    except ValidationError as e:
        raise ConfigError(str(e)) from e

    return LoadedConfig(render=render, ui=ui, global_path=global_path, repo_path=repo_path)
