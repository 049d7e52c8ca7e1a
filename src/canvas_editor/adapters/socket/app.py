"""Command-line entry point that runs the editor against a rendering service."""

from __future__ import annotations

import argparse
import asyncio
import os
from dataclasses import replace
from typing import Optional, Sequence

from canvas_editor.config import EditorConfig
from canvas_editor.runtime import telemetry

from .client import CanvasClient, CanvasConnectionError


def _parse_args(
    argv: Optional[Sequence[str]], defaults: EditorConfig
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the canvas text editor against a rendering service."
    )
    parser.add_argument(
        "--host",
        default=defaults.host,
        help=f"Rendering service host (default: {defaults.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=defaults.port,
        help=f"Rendering service port (default: {defaults.port})",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=int(defaults.tick_interval * 1000),
        help="Animation tick interval in milliseconds",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("CANVAS_EDITOR_LOG_PRESET"),
        help="Telemetry preset to apply before connecting",
    )
    return parser.parse_args(argv)


def build_config(
    argv: Optional[Sequence[str]] = None,
) -> tuple[EditorConfig, str | None]:
    defaults = EditorConfig.from_env()
    args = _parse_args(argv, defaults)
    config = replace(
        defaults,
        host=args.host,
        port=args.port,
        tick_interval=max(args.tick_ms, 1) / 1000.0,
    )
    return config, args.log_preset


def main(argv: Optional[Sequence[str]] = None) -> int:
    config, preset = build_config(argv)
    if preset:
        telemetry.configure(preset=preset)

    client = CanvasClient(config)
    try:
        asyncio.run(client.run())
    except CanvasConnectionError as exc:
        telemetry.record_event(
            "session.failed", level="error", error=str(exc)
        )
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
