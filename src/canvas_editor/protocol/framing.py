"""Newline framing for the byte stream coming from the rendering service."""

from __future__ import annotations

from typing import List

from canvas_editor.runtime import telemetry

DEFAULT_MAX_PENDING = 64 * 1024


class LineFramer:
    """Splits arbitrary byte chunks into complete records.

    Partial trailing data is kept until a later chunk completes it; empty
    records are discarded. A partial record longer than ``max_pending``
    bytes is dropped along with the rest of that record, up to and
    including its newline.
    """

    def __init__(
        self, *, encoding: str = "utf-8", max_pending: int = DEFAULT_MAX_PENDING
    ) -> None:
        if max_pending <= 0:
            raise ValueError("max_pending must be positive")
        self._encoding = encoding
        self._max_pending = max_pending
        self._pending = b""
        self._discarding = False

    @property
    def pending(self) -> bytes:
        return self._pending

    def feed(self, chunk: bytes) -> List[str]:
        if self._discarding:
            head, newline, chunk = chunk.partition(b"\n")
            self._report_overflow(len(head))
            if not newline:
                return []
            self._discarding = False

        data = self._pending + chunk
        *complete, self._pending = data.split(b"\n")
        if len(self._pending) > self._max_pending:
            self._report_overflow(len(self._pending))
            self._pending = b""
            self._discarding = True

        records: List[str] = []
        for raw in complete:
            text = raw.decode(self._encoding, errors="replace").rstrip("\r")
            if text:
                records.append(text)
        return records

    def reset(self) -> None:
        self._pending = b""
        self._discarding = False

    def _report_overflow(self, dropped: int) -> None:
        if dropped:
            telemetry.record_event(
                "protocol.overflow",
                level="warning",
                dropped=dropped,
                limit=self._max_pending,
            )


__all__ = ["DEFAULT_MAX_PENDING", "LineFramer"]
