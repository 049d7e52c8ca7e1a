"""Routes decoded input events to the session and emits rendered frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from canvas_editor.actions import editing
from canvas_editor.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    KeyResolution,
    load_default_keymaps,
)
from canvas_editor.protocol import (
    DrawCommand,
    InputEvent,
    KeyDown,
    LineFramer,
    MouseDown,
    Resize,
    decode_event,
)
from canvas_editor.runtime import telemetry
from canvas_editor.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class DispatcherHooks:
    """Callbacks the dispatcher uses to reach the outside world."""

    send: Callable[[Sequence[DrawCommand]], None]
    # Optional debug line sink, e.g. for a host-side console
    log: Callable[[str], None] = _noop


class InputDispatcher:
    """Single-state dispatcher: every event is handled immediately."""

    def __init__(
        self,
        session: EditorSession,
        hooks: DispatcherHooks,
        *,
        resolver: Optional[KeymapResolver] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.resolver = resolver or KeymapResolver(
            load_default_keymaps(KeymapRegistry())
        )
        self._framer = LineFramer()
        self.frames_sent = 0

    def feed(self, chunk: bytes) -> List[InputEvent]:
        """Frame, decode and dispatch a raw chunk read from the socket."""

        handled: List[InputEvent] = []
        for record in self._framer.feed(chunk):
            event = decode_event(record)
            if event is None:
                telemetry.record_event(
                    "dispatch.ignored", level="debug", record=record
                )
                continue
            self.handle_event(event)
            handled.append(event)
        return handled

    def handle_event(self, event: InputEvent) -> bool:
        """Apply ``event``; returns whether a frame was rendered."""

        with telemetry.span(
            f"dispatch::{type(event).__name__.lower()}",
            component="dispatch",
            session=self.session.name,
        ):
            if isinstance(event, KeyDown):
                self._handle_key(event.key)
            elif isinstance(event, MouseDown):
                self.session.buffer.map_point_to_cursor(
                    event.x, event.y, self.session.geometry
                )
            elif not isinstance(event, Resize):
                return False
            self.render()
        self._log_state("event ->", event=event)
        return True

    def tick(self) -> bool:
        """Advance animations; renders only while something is animating."""

        if not self.session.animations.tick():
            return False
        self.render()
        return True

    def render(self) -> Sequence[DrawCommand]:
        frame = self.session.render()
        self.hooks.send(frame)
        self.frames_sent += 1
        return frame

    def _handle_key(self, key: str) -> KeyResolution:
        resolution = self.resolver.resolve(key)
        if resolution.status == "insert" and resolution.text is not None:
            editing.insert_text(self.session, resolution.text)
        elif resolution.status == "action" and resolution.action is not None:
            resolution.action(self.session)
        return resolution

    def _log_state(self, prefix: str, **fields: object) -> None:
        buffer = self.session.buffer
        snapshot = {
            "cursor": buffer.cursor,
            "lines": buffer.line_count,
            "version": buffer.document.version,
            "animations": len(self.session.animations),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = ["DispatcherHooks", "InputDispatcher"]
