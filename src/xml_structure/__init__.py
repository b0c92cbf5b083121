"""XML Structure.

Converts parsed XML documents into nested structure values: mappings from
sanitized element name to sub-structure, with repeated sibling names merged
into order-preserving lists.

Progressive API Disclosure:
- Level 1: Simple functions - convert(), convert_file(), convert_string()
- Level 2: Configured converter - XMLStructureConverter class
- Level 3: Building blocks - DocumentWalker, sanitize_name
"""

__version__ = "0.1.0"
__author__ = "XML Structure Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured converter
from .api import ParseError, XMLStructureConverter, convert, convert_file, convert_string

# Configuration classes for advanced usage
from .shared.config import ConversionConfig

# Core result objects for all API levels
from .structure import (
    DocumentWalker,
    ElementResult,
    Repeated,
    Single,
    sanitize_name,
    structure_to_dict,
    structure_to_json,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple conversion functions
    "convert",
    "convert_file",
    "convert_string",

    # Level 2: Configured converter
    "XMLStructureConverter",
    "ConversionConfig",

    # Result objects and projection
    "ElementResult",
    "Single",
    "Repeated",
    "structure_to_dict",
    "structure_to_json",

    # Level 3: Building blocks
    "DocumentWalker",
    "sanitize_name",

    "ParseError",
]
