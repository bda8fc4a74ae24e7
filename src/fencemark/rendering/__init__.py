# topmark:header:start
#
#   project      : FenceMark
#   file         : __init__.py
#   file_relpath : src/fencemark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for FenceMark.

This package provides CLI/UI-adjacent helpers (colors) that are kept separate
from the embedding engine.
"""

from __future__ import annotations
