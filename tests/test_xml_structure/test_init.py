"""Test module for xml_structure package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_structure

    # Assert
    assert xml_structure is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    import xml_structure

    assert isinstance(xml_structure.__version__, str)
    assert xml_structure.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    import xml_structure

    assert xml_structure.__author__ == "XML Structure Team"


def test_package_exports_level_one_functions() -> None:
    """Test that the simple conversion functions are exported."""
    import xml_structure

    for name in ("convert", "convert_file", "convert_string"):
        assert name in xml_structure.__all__
        assert callable(getattr(xml_structure, name))
