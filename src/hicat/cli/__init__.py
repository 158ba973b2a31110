# topmark:header:start
#
#   project      : HiCat
#   file         : __init__.py
#   file_relpath : src/hicat/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command line for HiCat (``hicat [OPTIONS] [FILES]...``)."""

from __future__ import annotations
