# topmark:header:start
#
#   project      : HiCat
#   file         : __init__.py
#   file_relpath : src/hicat/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by the pipeline, config and CLI layers."""
