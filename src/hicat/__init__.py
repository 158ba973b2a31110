# topmark:header:start
#
#   project      : HiCat
#   file         : __init__.py
#   file_relpath : src/hicat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HiCat package.

HiCat concatenates text files to the terminal, ``cat``-style, and can number
non-blank lines, squeeze runs of blank lines, show non-printing control
characters as mnemonics, and syntax-highlight content with 24-bit colors. It
exposes both a CLI and a small rendering API (see `hicat.pipeline.engine`).
"""

from __future__ import annotations
