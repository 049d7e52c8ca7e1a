"""Text buffer: document storage, cursor state and editing operations."""

from .buffer import Buffer, BufferView, Transaction
from .document import BufferDocument
from .state import BufferState, Cursor
from .validation import BufferValidationError, clamp_column, ensure_cursor
from .wrap import AutoWrap

__all__ = [
    "AutoWrap",
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "BufferView",
    "Cursor",
    "Transaction",
    "clamp_column",
    "ensure_cursor",
]
