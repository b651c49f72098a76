# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console helpers with optional colour and emoji support."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _cached_console(color: bool, emoji: bool, stderr: bool, tty: bool) -> Console:
    color_system: Literal["auto"] | None = "auto" if color and tty else None
    return Console(
        color_system=color_system,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
        stderr=stderr,
    )


def get_console(*, color: bool, emoji: bool, stderr: bool = False) -> Console:
    """Return a Rich console configured for the presentation preferences.

    Consoles are cached per preference tuple. They resolve ``sys.stdout`` and
    ``sys.stderr`` at print time, so redirected streams are honoured.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.
        stderr: ``True`` to write to standard error instead of standard output.

    Returns:
        Console: Console matching the preferences.
    """

    return _cached_console(color, emoji, stderr, detect_tty())


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Render ``msg`` without markup interpretation.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: Write to standard error.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error summary line."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def detail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a single diagnostic line to standard error."""

    _print_line(msg, style="red", use_emoji=False, use_color=use_color, stderr=True)


def configure_logging(*, verbose: bool) -> None:
    """Route diagnostic logging through Rich on standard error.

    Args:
        verbose: Emit debug records when ``True``; warnings and above otherwise.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=get_console(color=detect_tty(), emoji=False, stderr=True),
        show_path=False,
        show_time=False,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


__all__ = [
    "configure_logging",
    "detail",
    "detect_tty",
    "emoji",
    "fail",
    "get_console",
    "info",
    "ok",
    "warn",
]
