"""Terminal message helpers for the ROSTER CLI.

Status lines go to stderr so stdout only carries command results.
Emoji markers fall back to ASCII on terminals that cannot encode them.
"""

import click


def _glyph(emoji: str, fallback: str) -> str:
    """Return `emoji` if stderr can encode it, otherwise `fallback`."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{_glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)
