# topmark:header:start
#
#   project      : FenceMark
#   file         : __init__.py
#   file_relpath : src/fencemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FenceMark package.

FenceMark keeps fenced code blocks in Markdown documents synchronized with the
source files they reference. It exposes both a CLI and a small typed API
(`fencemark.api`) for automation.
"""

from __future__ import annotations
