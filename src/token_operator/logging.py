"""Switching the dispatch trace on and off.

Every dispatch decision is logged at DEBUG level under the ``token_operator``
logger, which stays silent by default. `enable_dispatch_trace` attaches a Rich
handler to that logger so an application can watch which option values ran
which handlers while it builds a query; `dispatch_trace` does the same for the
duration of a ``with`` block.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "token_operator"


def trace_handler(
    console: Console | None = None, color: bool = True, show_path: bool = False
) -> RichHandler:
    """Build a DEBUG-level Rich handler for dispatch records.

    Args:
        console: Console to render to. Defaults to a new stderr console.
        color: Enable color output when True (ignored if ``console`` is given).
        show_path: Include the source file/line of each record.

    Returns:
        RichHandler: Handler that renders ``Option 'name'=value: applying fn``
            lines without timestamps.
    """
    if console is None:
        console = Console(color_system="auto" if color else None, stderr=True)
    handler = RichHandler(
        level=logging.DEBUG,
        console=console,
        show_time=False,
        show_path=show_path,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def enable_dispatch_trace(
    console: Console | None = None, color: bool = True, show_path: bool = False
) -> RichHandler:
    """Attach a trace handler to the package logger and lower it to DEBUG.

    Returns:
        The attached handler, to pass to `disable_dispatch_trace`.
    """
    handler = trace_handler(console, color=color, show_path=show_path)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def disable_dispatch_trace(handler: RichHandler) -> None:
    """Detach a handler added by `enable_dispatch_trace` and reset the level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.removeHandler(handler)
    handler.close()
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.setLevel(logging.NOTSET)


@contextmanager
def dispatch_trace(
    console: Console | None = None, color: bool = True
) -> Iterator[RichHandler]:
    """Render the dispatch trace for the duration of a ``with`` block."""
    handler = enable_dispatch_trace(console, color=color)
    try:
        yield handler
    finally:
        disable_dispatch_trace(handler)
