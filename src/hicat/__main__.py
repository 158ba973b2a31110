# topmark:header:start
#
#   project      : HiCat
#   file         : __main__.py
#   file_relpath : src/hicat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running HiCat via ``python -m hicat``.

Delegates to :func:`hicat.cli.main.cli`, the single authoritative CLI entry
point, so both launch styles behave identically.

Examples:
    Render a file with line numbers::

        python -m hicat -b README.md
"""

from __future__ import annotations

from hicat.cli.main import cli

if __name__ == "__main__":
    cli()
