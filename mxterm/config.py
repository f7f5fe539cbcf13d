"""Terminal configuration, version information and child environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Mapping, Optional

import yaml

NAME = "mxterm"
TITLE = "mxterm - Multimedia Terminal Emulator"
MAJOR = 0
MINOR = 3
REVISION = 2010

UNSET_ENV = ("TMUX", "TERM", "TERM_PROGRAM")


def version() -> str:
    """Return the version as ``major.minor.revision``."""
    return f"{MAJOR}.{MINOR}.{REVISION}"


def _key(name: str) -> Dict[str, str]:
    return {"yaml": name}


@dataclass
class ShellConfig:
    default: List[str] = field(default_factory=list, metadata=_key("Default"))
    fallback: List[str] = field(
        default_factory=lambda: ["/bin/sh"], metadata=_key("Fallback")
    )


@dataclass
class TypeFaceConfig:
    font_name: str = field(default="", metadata=_key("FontName"))
    font_size: int = field(default=14, metadata=_key("FontSize"))
    ligatures: bool = field(default=False, metadata=_key("Ligatures"))
    drop_shadow: bool = field(default=True, metadata=_key("DropShadow"))
    adjust_cell_width: int = field(default=0, metadata=_key("AdjustCellWidth"))
    adjust_cell_height: int = field(default=0, metadata=_key("AdjustCellHeight"))


@dataclass
class _TableWidgetConfig:
    scroll_multiplier_x: int = field(default=1, metadata=_key("ScrollMultiplierX"))
    scroll_multiplier_y: int = field(default=1, metadata=_key("ScrollMultiplierY"))


@dataclass
class _WidgetsConfig:
    table: _TableWidgetConfig = field(
        default_factory=_TableWidgetConfig, metadata=_key("Table")
    )


@dataclass
class TerminalConfig:
    scrollback_history: int = field(default=10000, metadata=_key("ScrollbackHistory"))
    scrollback_close_key_press: bool = field(
        default=True, metadata=_key("ScrollbackCloseKeyPress")
    )
    jump_scroll_line_count: int = field(default=5, metadata=_key("JumpScrollLineCount"))
    light_mode: bool = field(default=False, metadata=_key("LightMode"))
    type_face: TypeFaceConfig = field(
        default_factory=TypeFaceConfig, metadata=_key("TypeFace")
    )
    widgets: _WidgetsConfig = field(
        default_factory=_WidgetsConfig, metadata=_key("Widgets")
    )


@dataclass
class WindowConfig:
    opacity: int = field(default=100, metadata=_key("Opacity"))
    status_bar: bool = field(default=True, metadata=_key("StatusBar"))
    refresh_interval: int = field(default=0, metadata=_key("RefreshInterval"))


@dataclass
class TmuxConfig:
    enabled: bool = field(default=False, metadata=_key("Enabled"))


@dataclass
class Config:
    shell: ShellConfig = field(default_factory=ShellConfig, metadata=_key("Shell"))
    terminal: TerminalConfig = field(
        default_factory=TerminalConfig, metadata=_key("Terminal")
    )
    window: WindowConfig = field(default_factory=WindowConfig, metadata=_key("Window"))
    tmux: TmuxConfig = field(default_factory=TmuxConfig, metadata=_key("Tmux"))


def _coerce(value: Any, current: Any, path: str) -> Any:
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ValueError(f"{path}: expected a boolean, got {value!r}")
        return value
    if isinstance(current, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{path}: expected an integer, got {value!r}")
        return value
    if isinstance(current, str):
        if not isinstance(value, str):
            raise ValueError(f"{path}: expected a string, got {value!r}")
        return value
    if isinstance(current, list):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"{path}: expected a list of strings, got {value!r}")
        return list(value)
    raise ValueError(f"{path}: unsupported field type")


def _decode(target: Any, data: Any, path: str) -> None:
    if not isinstance(data, Mapping):
        raise ValueError(f"{path or 'document'}: expected a mapping")
    by_key = {f.metadata["yaml"]: f for f in fields(target)}
    for key, value in data.items():
        spec = by_key.get(key)
        where = f"{path}.{key}" if path else str(key)
        if spec is None:
            raise ValueError(f"{where}: unknown field")
        if value is None:
            continue
        current = getattr(target, spec.name)
        if is_dataclass(current):
            _decode(current, value, where)
        else:
            setattr(target, spec.name, _coerce(value, current, where))


def load_config(text: str) -> Config:
    """Parse YAML text over the defaults; unknown fields are an error."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise ValueError(f"invalid configuration: {err}") from err
    config = Config()
    if data is not None:
        _decode(config, data, "")
    return config


def default_config() -> Config:
    """Return the built-in configuration."""
    return Config()


def child_environment(
    config: Config, base: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Build the environment for the shell started inside the terminal."""
    env = dict(os.environ if base is None else base)
    for name in UNSET_ENV:
        env.pop(name, None)
    env.update({
        "MXTERM": "true",
        "MXTERM_VERSION": version(),
        "TERM": "xterm-256color",
        "TERM_PROGRAM": NAME,
    })
    if config.tmux.enabled:
        env["MXTERM_TMUX"] = "true"
    return env