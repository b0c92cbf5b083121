"""Public API for XML structure conversion.

Level 1 functions (convert, convert_file, convert_string) cover one-off
conversions; XMLStructureConverter holds configuration for reuse.
"""

from .converter import (
    ParseError,
    XMLStructureConverter,
    convert,
    convert_file,
    convert_string,
    resolve_path,
)

__all__ = [
    "ParseError",
    "XMLStructureConverter",
    "convert",
    "convert_file",
    "convert_string",
    "resolve_path",
]
