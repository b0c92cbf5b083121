"""Value types produced by the XML structure conversion.

An element is converted into an ``ElementResult``. Its child elements are kept
in a mapping from sanitized name to ``StructureValue``, which is either a
``Single`` result (name seen once) or a ``Repeated`` sequence (name seen more
than once, in document order).
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from xml_structure.shared import ConversionConfig, get_logger

_logger = get_logger(__name__, component="structure_values")


@dataclass(frozen=True)
class TextBuckets:
    """Text, comment and CDATA content found directly under an element."""

    text: Optional[str] = None
    comment: Optional[str] = None
    cdata: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if no bucket holds content."""
        return self.text is None and self.comment is None and self.cdata is None


@dataclass(frozen=True)
class ElementResult:
    """Full conversion result for one element node.

    ``attributes`` and ``children`` are ``None`` rather than empty when the
    element has no attributes or no child elements.
    """

    attributes: Optional[Dict[str, str]] = None
    text: Optional[str] = None
    comment: Optional[str] = None
    cdata: Optional[str] = None
    children: Optional[Dict[str, "StructureValue"]] = None

    @property
    def has_children(self) -> bool:
        """Check if the element has any child elements."""
        return bool(self.children)

    @property
    def child_names(self) -> List[str]:
        """Sanitized child names in first-occurrence order."""
        return list(self.children or {})

    def child(self, name: str) -> Optional["StructureValue"]:
        """Look up the value stored for a sanitized child name."""
        if not self.children:
            return None
        return self.children.get(name)

    def to_dict(self, config: Optional[ConversionConfig] = None) -> Dict[str, Any]:
        """Convert element result to plain dictionary representation.

        Attributes and text buckets use the configured reserved keys; child
        elements use their sanitized names. A child whose name collides with
        an attribute or text entry already present is dropped from the
        projection with a warning.
        """
        config = config or ConversionConfig()
        result: Dict[str, Any] = {}

        if self.attributes is not None:
            result[config.attributes_key] = dict(self.attributes)
        if self.text is not None:
            result[config.text_key] = self.text
        if self.comment is not None:
            result[config.comment_key] = self.comment
        if self.cdata is not None:
            result[config.cdata_key] = self.cdata

        for name, value in (self.children or {}).items():
            if name in result:
                _logger.warning(
                    "Child element name collides with reserved key",
                    extra={"child_name": name}
                )
                continue
            result[name] = value.to_plain(config)

        return result


@dataclass(frozen=True)
class Single:
    """A child name observed exactly once."""

    value: ElementResult

    def to_plain(self, config: Optional[ConversionConfig] = None) -> Dict[str, Any]:
        """Project to a plain dictionary."""
        return self.value.to_dict(config)


@dataclass(frozen=True)
class Repeated:
    """A child name observed more than once, results in document order."""

    items: Tuple[ElementResult, ...]

    def __post_init__(self) -> None:
        """Validate that a repeated value holds at least two results."""
        if len(self.items) < 2:
            raise ValueError("Repeated value requires at least two results")

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> ElementResult:
        return self.items[index]

    def to_plain(self, config: Optional[ConversionConfig] = None) -> List[Dict[str, Any]]:
        """Project to a list of plain dictionaries."""
        return [item.to_dict(config) for item in self.items]


StructureValue = Union[Single, Repeated]

# Top-level mapping from the root element's sanitized name to its result
Structure = Dict[str, ElementResult]


def merge_child(
    children: Dict[str, StructureValue], name: str, result: ElementResult
) -> StructureValue:
    """Fold one child result into a child mapping.

    An unseen name stores ``Single(result)``; a second occurrence turns the
    entry into ``Repeated`` with the first result unchanged; later occurrences
    are appended. Existing results are never overwritten.

    Returns:
        The value now stored under ``name``
    """
    existing = children.get(name)
    if existing is None:
        merged: StructureValue = Single(result)
    elif isinstance(existing, Single):
        merged = Repeated((existing.value, result))
    elif isinstance(existing, Repeated):
        merged = Repeated(existing.items + (result,))
    else:
        raise TypeError(f"Unexpected structure value: {type(existing).__name__}")

    children[name] = merged
    return merged


def structure_to_dict(
    structure: Structure, config: Optional[ConversionConfig] = None
) -> Dict[str, Any]:
    """Project a top-level structure to plain dictionaries."""
    return {name: result.to_dict(config) for name, result in structure.items()}


def structure_to_json(
    structure: Structure,
    config: Optional[ConversionConfig] = None,
    indent: Optional[int] = 2
) -> str:
    """Serialize a top-level structure to JSON."""
    return json.dumps(
        structure_to_dict(structure, config), indent=indent, ensure_ascii=False
    )
