"""Process exit statuses returned by the demo CLI.

A parse outcome maps onto the first two. The last two only come out of
the ``cli()`` boundary.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Options parsed, or help printed on request."""

GENERAL_ERROR: int = 1
"""Bad command line or bad declaration; the message names the cause."""

UNEXPECTED_ERROR: int = 2
"""A bug: something other than a cmdopts error reached ``cli()``."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C, the shell's 128 + SIGINT."""
