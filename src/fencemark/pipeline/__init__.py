# topmark:header:start
#
#   project      : FenceMark
#   file         : __init__.py
#   file_relpath : src/fencemark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FenceMark embedding pipeline.

This package contains the stages a fenced block passes through:

- Fence location (`fencemark.pipeline.fence`)
- Comment reading and directive parsing (`comments`, `directive`)
- Snippet extraction and dedent (`extractor`)
- Fence rendering and comparison (`renderer`)
- Document orchestration (`scanner`)

Outcomes are plain data (`fencemark.pipeline.outcomes`); the pipeline never
prints.
"""
