# topmark:header:start
#
#   project      : HiCat
#   file         : __init__.py
#   file_relpath : src/hicat/highlight/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax highlighting: capability contract, Pygments backend and ANSI encoding."""
