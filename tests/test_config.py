import pytest

from mxterm.config import (
    Config,
    NAME,
    ShellConfig,
    TmuxConfig,
    child_environment,
    default_config,
    load_config,
    version,
)


def test_version_string():
    assert version() == "0.3.2010"


def test_default_config_matches_empty_document():
    assert default_config() == load_config("")


def test_load_overrides_nested_fields():
    config = load_config(
        "Terminal:\n"
        "  ScrollbackHistory: 42\n"
        "  TypeFace:\n"
        "    Ligatures: true\n"
        "Tmux:\n"
        "  Enabled: true\n"
    )
    assert config.terminal.scrollback_history == 42
    assert config.terminal.type_face.ligatures is True
    assert config.tmux.enabled is True
    assert config.window == default_config().window


def test_load_shell_lists():
    config = load_config("Shell:\n  Default: [zsh, -l]\n  Fallback: [sh]\n")
    assert config.shell == ShellConfig(default=["zsh", "-l"], fallback=["sh"])


def test_load_widget_table():
    config = load_config("Terminal:\n  Widgets:\n    Table:\n      ScrollMultiplierY: 7\n")
    assert config.terminal.widgets.table.scroll_multiplier_y == 7


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        load_config("Terminal:\n  NoSuchOption: 1\n")


def test_wrong_type_rejected():
    with pytest.raises(ValueError):
        load_config("Terminal:\n  ScrollbackHistory: many\n")
    with pytest.raises(ValueError):
        load_config("Tmux:\n  Enabled: 1\n")


def test_non_mapping_rejected():
    with pytest.raises(ValueError):
        load_config("- a\n- b\n")


def test_child_environment_exports():
    base = {"HOME": "/home/user", "TMUX": "/tmp/x", "TERM": "dumb"}
    env = child_environment(Config(), base)
    assert env["HOME"] == "/home/user"
    assert "TMUX" not in env
    assert env["TERM"] == "xterm-256color"
    assert env["TERM_PROGRAM"] == NAME
    assert env["MXTERM_VERSION"] == version()
    assert "MXTERM_TMUX" not in env
    assert base["TERM"] == "dumb"


def test_child_environment_tmux_flag():
    config = Config(tmux=TmuxConfig(enabled=True))
    env = child_environment(config, {})
    assert env["MXTERM_TMUX"] == "true"