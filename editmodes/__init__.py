"""Emacs and Vi style parsing of terminal key events into line-editor events."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "keybindings",
    "emacs",
    "vi_motion",
    "vi_command",
    "vi_parser",
    "vi_keybindings",
    "vi",
]