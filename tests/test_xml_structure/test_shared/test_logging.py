"""Tests for correlation-aware logging."""

import logging

from xml_structure.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test correlation logger behavior."""

    def test_get_logger_returns_correlation_logger(self):
        """Test factory function."""
        logger = get_logger("xml_structure.api.converter", "req-1", "converter")

        assert isinstance(logger, CorrelationLogger)
        assert logger.correlation_id == "req-1"
        assert logger.component == "converter"
        assert logger.logger.name == "xml_structure.api.converter"

    def test_component_defaults_to_last_name_segment(self):
        """Test default component derivation."""
        logger = get_logger("xml_structure.structure.walker")

        assert logger.component == "walker"
        assert logger.correlation_id is None

    def test_process_merges_extra(self):
        """Test that call-site extra is merged with correlation fields."""
        logger = get_logger("xml_structure.test", "req-2", "unit")

        _, kwargs = logger.process("message", {"extra": {"source": "doc.xml"}})

        assert kwargs["extra"] == {
            "component": "unit",
            "correlation_id": "req-2",
            "source": "doc.xml",
        }

    def test_records_carry_correlation_fields(self, caplog):
        """Test emitted records include component and correlation ID."""
        logger = get_logger("xml_structure.test", "req-3", "unit")

        with caplog.at_level(logging.INFO, logger="xml_structure.test"):
            logger.info("hello", extra={"answer": 42})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.correlation_id == "req-3"
        assert record.component == "unit"
        assert record.answer == 42

    def test_for_component_keeps_correlation_id(self):
        """Test deriving a logger for another component."""
        logger = get_logger("xml_structure.test", "req-4", "unit")
        child = logger.for_component("other")

        assert child.correlation_id == "req-4"
        assert child.component == "other"
