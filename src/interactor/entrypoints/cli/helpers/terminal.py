"""Terminal message helpers for the INTERACTOR CLI.

Human-oriented lines (success, warning, error) go to **stderr** with an emoji
marker that falls back to ASCII on terminals that cannot encode it, so stdout
stays free for machine-readable output such as ``--json``.
"""

import click

# kind -> (emoji, ASCII fallback, color)
_MARKERS = {
    "success": ("✅", "[OK]", "green"),
    "warn": ("⚠️", "[!]", "yellow"),
    "error": ("❌", "[X]", "red"),
}


def _can_encode(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the marker for ``kind`` ("success", "warn" or "error").

    The emoji is used when stderr can encode it; otherwise the ASCII fallback.
    """
    emoji, fallback, _ = _MARKERS[kind]
    return emoji if _can_encode(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    color = _MARKERS[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=color, bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    _emit("success", msg)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    _emit("warn", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    _emit("error", msg)
