"""Run the cmdopts demo with ``python -m cmdopts``.

Same behaviour as the ``cmdopts-demo`` script: parse ``sys.argv[1:]``
against the demo declarations and exit with the outcome's code.
"""

from __future__ import annotations

from cmdopts.cli.app import cli

if __name__ == "__main__":
    cli()
