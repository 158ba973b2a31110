# topmark:header:start
#
#   project      : HiCat
#   file         : __init__.py
#   file_relpath : src/hicat/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-rendering pipeline.

A file's pass is a `RenderContext` threaded through two steps: the
`ReaderStep` loads the contents and the `RenderStep` segments, squeezes,
escapes, highlights, numbers and writes them. Use `render_files` or
`render_text` from `hicat.pipeline.engine` to run it.
"""

from __future__ import annotations
