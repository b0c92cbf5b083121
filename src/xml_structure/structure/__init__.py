"""Structure conversion engine.

Turns a parsed DOM tree into nested structure values in a single bottom-up
pass.

Key Components:
    sanitize_name: Maps disallowed characters in names to safe substrings
    classify_node: Categorizes DOM nodes as element, text, comment or CDATA
    extract_attributes: Reads an element's attributes into an ordered mapping
    DocumentWalker: Recursive converter producing ElementResult values
    Single / Repeated: The two variants of a child entry
"""

from .naming import sanitize_name
from .nodes import NodeKind, classify_node, extract_attributes, text_content
from .values import (
    ElementResult,
    Repeated,
    Single,
    Structure,
    StructureValue,
    TextBuckets,
    merge_child,
    structure_to_dict,
    structure_to_json,
)
from .walker import ChildAccumulator, DocumentWalker

__all__ = [
    "ChildAccumulator",
    "DocumentWalker",
    "ElementResult",
    "NodeKind",
    "Repeated",
    "Single",
    "Structure",
    "StructureValue",
    "TextBuckets",
    "classify_node",
    "extract_attributes",
    "merge_child",
    "sanitize_name",
    "structure_to_dict",
    "structure_to_json",
    "text_content",
]
