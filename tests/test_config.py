from __future__ import annotations

from canvas_editor.adapters.socket.app import build_config
from canvas_editor.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.port == 5005
    assert config.tick_interval == 0.05
    assert config.geometry.padding == 26


def test_from_env_overrides() -> None:
    config = EditorConfig.from_env(
        {
            "CANVAS_EDITOR_HOST": "10.0.0.2",
            "CANVAS_EDITOR_PORT": "6000",
            "CANVAS_EDITOR_TICK_MS": "100",
            "CANVAS_EDITOR_MAX_LINE_WIDTH": "40",
            "CANVAS_EDITOR_CANVAS_WIDTH": "1024",
        }
    )

    assert config.host == "10.0.0.2"
    assert config.port == 6000
    assert config.tick_interval == 0.1
    assert config.geometry.max_line_width == 40
    assert config.geometry.canvas_width == 1024


def test_from_env_ignores_malformed_numbers() -> None:
    config = EditorConfig.from_env({"CANVAS_EDITOR_PORT": "not-a-port"})

    assert config.port == 5005


def test_from_env_ignores_non_positive_numbers() -> None:
    config = EditorConfig.from_env(
        {
            "CANVAS_EDITOR_MAX_LINE_WIDTH": "0",
            "CANVAS_EDITOR_CANVAS_WIDTH": "-5",
            "CANVAS_EDITOR_CANVAS_HEIGHT": "0",
            "CANVAS_EDITOR_PORT": "-1",
            "CANVAS_EDITOR_TICK_MS": "0",
        }
    )
    defaults = EditorConfig()

    assert config.geometry.max_line_width == defaults.geometry.max_line_width
    assert config.geometry.canvas_width == defaults.geometry.canvas_width
    assert config.geometry.canvas_height == defaults.geometry.canvas_height
    assert config.port == 5005
    assert config.tick_interval == 0.05


def test_cli_arguments_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("CANVAS_EDITOR_PORT", "7000")

    config, preset = build_config(["--host", "example", "--tick-ms", "20"])

    assert config.host == "example"
    assert config.port == 7000
    assert config.tick_interval == 0.02
    assert preset is None
