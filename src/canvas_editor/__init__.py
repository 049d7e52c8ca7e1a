"""Line-based text editor core driving a remote canvas renderer."""

__all__ = [
    "actions",
    "adapters",
    "animation",
    "buffer",
    "config",
    "dispatch",
    "keymaps",
    "protocol",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"
