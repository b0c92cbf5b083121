"""Recursive conversion of DOM elements into structure values.

``DocumentWalker`` folds an element's subtree bottom-up. For each element a
fresh ``ChildAccumulator`` collects child results under the single-vs-repeated
merge policy and the direct text, comment and CDATA content; the walker then
composes the immutable ``ElementResult``.
"""

from typing import Any, Dict, Optional

from xml_structure.shared import ConversionConfig, get_logger
from xml_structure.structure.naming import sanitize_name
from xml_structure.structure.nodes import (
    NodeKind,
    classify_node,
    extract_attributes,
    is_document,
    iter_child_nodes,
    text_content,
)
from xml_structure.structure.values import (
    ElementResult,
    Repeated,
    Structure,
    StructureValue,
    TextBuckets,
    merge_child,
)


# ASCII whitespace, as matched by the XML S production and regex \s
XML_WHITESPACE = " \t\r\n\f\v"


class ChildAccumulator:
    """Collects the converted children and direct text of one element."""

    def __init__(self, logger=None) -> None:
        self._children: Dict[str, StructureValue] = {}
        self._text: Dict[NodeKind, str] = {}
        self._logger = logger

    def add_element(self, name: str, result: ElementResult) -> StructureValue:
        """Fold a converted child element in under its sanitized name."""
        merged = merge_child(self._children, name, result)
        if self._logger is not None and isinstance(merged, Repeated) and len(merged) == 2:
            self._logger.debug(
                "Repeated child name promoted to list",
                extra={"child_name": name}
            )
        return merged

    def add_text(self, kind: NodeKind, data: str) -> bool:
        """Append a text-bearing fragment to the bucket for its kind.

        Whitespace-only fragments are discarded.

        Returns:
            True if the fragment was kept
        """
        if kind not in (NodeKind.TEXT, NodeKind.COMMENT, NodeKind.CDATA):
            raise ValueError(f"Not a text-bearing node kind: {kind.name}")
        if not data.strip(XML_WHITESPACE):
            return False

        self._text[kind] = self._text.get(kind, "") + data
        return True

    def buckets(self) -> TextBuckets:
        return TextBuckets(
            text=self._text.get(NodeKind.TEXT),
            comment=self._text.get(NodeKind.COMMENT),
            cdata=self._text.get(NodeKind.CDATA),
        )

    def children(self) -> Optional[Dict[str, StructureValue]]:
        return dict(self._children) if self._children else None


class DocumentWalker:
    """Converts DOM elements into ``ElementResult`` values.

    Recursion depth equals the nesting depth of the document; no limit is
    imposed here.

    Examples:
        >>> from xml.dom import minidom
        >>> root = minidom.parseString('<a x="1"><b>hi</b></a>').documentElement
        >>> result = DocumentWalker().walk(root)
        >>> result.attributes
        {'x': '1'}
        >>> result.child("b").value.text
        'hi'
    """

    def __init__(
        self,
        config: Optional[ConversionConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        self.config = config or ConversionConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "document_walker")

    def sanitize(self, name: str) -> str:
        """Sanitize a name with the configured substitution table."""
        return sanitize_name(name, self.config.name_substitutions)

    def accumulate(self, node: Any) -> ChildAccumulator:
        """Walk the direct children of a node into a fresh accumulator."""
        accumulator = ChildAccumulator(self.logger)

        for child in iter_child_nodes(node):
            kind = classify_node(child)
            if kind is NodeKind.ELEMENT:
                result = self.walk(child)
                accumulator.add_element(self.sanitize(child.nodeName), result)
            elif kind is NodeKind.OTHER:
                continue
            else:
                accumulator.add_text(kind, child.data)

        return accumulator

    def walk(self, element: Any) -> ElementResult:
        """Convert one element and its subtree."""
        accumulator = self.accumulate(element)
        buckets = accumulator.buckets()
        children = accumulator.children()

        text = buckets.text
        if children is None and buckets.is_empty:
            # Childless, textless elements still report their raw text content
            text = text_content(element)

        return ElementResult(
            attributes=extract_attributes(element, self.config.name_substitutions),
            text=text,
            comment=buckets.comment,
            cdata=buckets.cdata,
            children=children,
        )

    def walk_document(self, document: Any) -> Structure:
        """Convert a DOM document into the top-level structure.

        Text and comments outside the root element are discarded.
        """
        if not is_document(document):
            raise TypeError(f"Expected a DOM document, got {type(document).__name__}")

        structure: Structure = {}
        children = self.accumulate(document).children() or {}
        for name, value in children.items():
            # A well-formed document has exactly one root element
            structure[name] = value.items[0] if isinstance(value, Repeated) else value.value
        return structure
