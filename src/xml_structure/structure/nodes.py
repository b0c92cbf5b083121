"""DOM node inspection helpers.

Nodes are consumed through the minimal DOM capability set shared by
``xml.dom.minidom`` and other W3C DOM implementations: ``nodeType``,
``nodeName``, ``hasChildNodes()``, ``childNodes``, ``attributes`` and ``data``.
"""

from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple
from xml.dom import Node

from xml_structure.shared.config import DEFAULT_NAME_SUBSTITUTIONS
from xml_structure.structure.naming import sanitize_name


class NodeKind(Enum):
    """Categories a child node can fall into during conversion."""

    ELEMENT = auto()
    TEXT = auto()
    COMMENT = auto()
    CDATA = auto()
    OTHER = auto()      # Processing instructions, doctypes, entity references


_NODE_KINDS = {
    Node.ELEMENT_NODE: NodeKind.ELEMENT,
    Node.TEXT_NODE: NodeKind.TEXT,
    Node.COMMENT_NODE: NodeKind.COMMENT,
    Node.CDATA_SECTION_NODE: NodeKind.CDATA,
}


def classify_node(node: Any) -> NodeKind:
    """Categorize a node by its DOM node type."""
    return _NODE_KINDS.get(getattr(node, "nodeType", None), NodeKind.OTHER)


def is_document(node: Any) -> bool:
    """Check if a node is a DOM document."""
    return getattr(node, "nodeType", None) == Node.DOCUMENT_NODE


def iter_child_nodes(node: Any):
    """Yield the children of a node in document order."""
    if not node.hasChildNodes():
        return
    yield from node.childNodes


def extract_attributes(
    node: Any,
    substitutions: Tuple[Tuple[str, str], ...] = DEFAULT_NAME_SUBSTITUTIONS
) -> Optional[Dict[str, str]]:
    """Read an element's attributes into an ordered mapping.

    Names are sanitized; values are taken literally as the parser delivered
    them.

    Returns:
        Mapping of sanitized name to value, or None when there are no attributes
    """
    attributes = getattr(node, "attributes", None)
    if attributes is None or attributes.length == 0:
        return None

    result: Dict[str, str] = {}
    for index in range(attributes.length):
        attribute = attributes.item(index)
        result[sanitize_name(attribute.name, substitutions)] = attribute.value
    return result


def text_content(node: Any) -> str:
    """Concatenate the text and CDATA data of all descendants of a node.

    Comments and processing instructions do not contribute, matching the DOM
    ``textContent`` attribute.
    """
    parts = []
    for child in iter_child_nodes(node):
        kind = classify_node(child)
        if kind in (NodeKind.TEXT, NodeKind.CDATA):
            parts.append(child.data)
        elif kind is NodeKind.ELEMENT:
            parts.append(text_content(child))
    return "".join(parts)
