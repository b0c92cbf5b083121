"""Converter API with progressive disclosure for XML structure conversion.

This module provides the entry points of the library, from simple
module-level functions to a configurable converter class. Documents are
acquired with ``xml.dom.minidom``; parse failures propagate unchanged as
``ParseError`` (expat's ``ExpatError``).
"""

import time
from pathlib import Path
from typing import Any, Dict, Optional, Union
from xml.dom import minidom
from xml.parsers.expat import ExpatError as ParseError

from xml_structure.shared import ConversionConfig, get_logger
from xml_structure.structure import DocumentWalker, Structure, classify_node
from xml_structure.structure.nodes import NodeKind, is_document

# Type definitions for input data
PathType = Union[str, Path]
SourceType = Union[str, Path, Any]

MS_PER_SECOND = 1000  # Milliseconds per second conversion


def resolve_path(
    file_path: PathType, config: Optional[ConversionConfig] = None
) -> Path:
    """Locate an input file, appending the default extension if needed.

    Args:
        file_path: Path to the XML file, with or without extension
        config: Conversion configuration (extension settings)

    Returns:
        Path of an existing file

    Raises:
        FileNotFoundError: If neither the path nor the path with the default
            extension names an existing file

    Examples:
        >>> resolve_path("document")   # document.xml exists
        PosixPath('document.xml')
    """
    config = config or ConversionConfig()
    candidate = Path(file_path)
    if candidate.is_file():
        return candidate

    if config.append_default_extension and not config.has_recognized_extension(
        candidate.name
    ):
        candidate = Path(str(file_path) + config.default_extension)
        if candidate.is_file():
            return candidate

    raise FileNotFoundError(f"The file {candidate} could not be found")


class XMLStructureConverter:
    """Configurable converter from XML documents to structure values.

    Attributes:
        config: Current conversion configuration
        correlation_id: Correlation ID for request tracking

    Examples:
        Basic usage with default configuration:
        >>> converter = XMLStructureConverter()
        >>> structure = converter.convert_string('<root><item>value</item></root>')
        >>> structure["root"].child("item").value.text
        'value'

        Custom projection keys:
        >>> converter = XMLStructureConverter(ConversionConfig(text_key="#text"))
    """

    def __init__(
        self,
        config: Optional[ConversionConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize converter.

        Args:
            config: Conversion configuration (defaults to ConversionConfig())
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ConversionConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "structure_converter")
        self._walker = DocumentWalker(self.config, self.correlation_id)

        self._conversion_count = 0
        self._total_processing_time = 0.0

    def convert(self, source: SourceType) -> Structure:
        """Convert a DOM node or an XML file into a structure.

        Args:
            source: DOM document/element, or path to an XML file

        Returns:
            Mapping from the root element's sanitized name to its result
        """
        if isinstance(source, (str, Path)):
            return self.convert_file(source)
        if hasattr(source, "nodeType"):
            return self.convert_node(source)
        raise TypeError(f"Unsupported source type: {type(source).__name__}")

    def convert_file(self, file_path: PathType) -> Structure:
        """Resolve, parse and convert an XML file."""
        resolved = resolve_path(file_path, self.config)
        if resolved != Path(file_path):
            self.logger.debug(
                "Default extension appended to input path",
                extra={"requested": str(file_path), "resolved": str(resolved)}
            )

        start_time = time.time()
        with resolved.open("rb") as file:
            document = minidom.parse(file)
        try:
            return self._convert_timed(document, str(resolved), start_time)
        finally:
            document.unlink()

    def convert_string(self, xml_content: Union[str, bytes]) -> Structure:
        """Parse and convert XML content held in memory."""
        start_time = time.time()
        document = minidom.parseString(xml_content)
        try:
            return self._convert_timed(document, "<string>", start_time)
        finally:
            document.unlink()

    def convert_node(self, node: Any) -> Structure:
        """Convert an already parsed DOM document or element."""
        return self._convert_timed(node, type(node).__name__, time.time())

    def _convert_timed(self, node: Any, source: str, start_time: float) -> Structure:
        self.logger.info("Starting structure conversion", extra={"source": source})

        if is_document(node):
            structure = self._walker.walk_document(node)
        elif classify_node(node) is NodeKind.ELEMENT:
            structure = {self._walker.sanitize(node.nodeName): self._walker.walk(node)}
        else:
            raise TypeError(
                f"Expected a DOM document or element, got {type(node).__name__}"
            )

        processing_time = (time.time() - start_time) * MS_PER_SECOND
        self._conversion_count += 1
        self._total_processing_time += processing_time

        self.logger.info(
            "Structure conversion completed",
            extra={
                "source": source,
                "root_names": list(structure),
                "processing_time_ms": processing_time,
            }
        )
        return structure

    @property
    def statistics(self) -> Dict[str, Any]:
        """Usage statistics for this converter instance."""
        average = (
            self._total_processing_time / self._conversion_count
            if self._conversion_count else 0.0
        )
        return {
            "conversion_count": self._conversion_count,
            "total_processing_time_ms": self._total_processing_time,
            "average_processing_time_ms": average,
        }

    def reset_statistics(self) -> None:
        self._conversion_count = 0
        self._total_processing_time = 0.0


def convert(
    source: SourceType,
    config: Optional[ConversionConfig] = None,
    correlation_id: Optional[str] = None
) -> Structure:
    """Convert a DOM node or an XML file path into a structure.

    Examples:
        >>> structure = convert("document")          # document.xml on disk
        >>> structure = convert(minidom.parseString("<a/>"))
        >>> structure["a"].text
        ''
    """
    return XMLStructureConverter(config, correlation_id).convert(source)


def convert_file(
    file_path: PathType,
    config: Optional[ConversionConfig] = None,
    correlation_id: Optional[str] = None
) -> Structure:
    """Convert an XML file, appending the default extension if needed."""
    return XMLStructureConverter(config, correlation_id).convert_file(file_path)


def convert_string(
    xml_content: Union[str, bytes],
    config: Optional[ConversionConfig] = None,
    correlation_id: Optional[str] = None
) -> Structure:
    """Convert XML content held in a string or bytes."""
    return XMLStructureConverter(config, correlation_id).convert_string(xml_content)

