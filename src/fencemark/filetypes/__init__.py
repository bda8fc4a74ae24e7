# topmark:header:start
#
#   project      : FenceMark
#   file         : __init__.py
#   file_relpath : src/fencemark/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Supported fence extension tags and the comment family each one uses."""
