"""Tests for exception classes."""

from icsgen.exceptions import (
    DocumentError,
    IcsError,
    InvalidArgumentError,
    InvalidPropertyError,
)


def test_ics_error():
    """Test IcsError base exception."""
    error = IcsError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


def test_invalid_argument_error():
    """Test InvalidArgumentError."""
    error = InvalidArgumentError("PRODID cannot be empty")
    assert str(error) == "PRODID cannot be empty"
    assert isinstance(error, IcsError)
    assert isinstance(error, ValueError)


def test_invalid_property_error():
    """Test InvalidPropertyError."""
    error = InvalidPropertyError("Property name cannot be empty")
    assert str(error) == "Property name cannot be empty"
    assert isinstance(error, IcsError)
    assert isinstance(error, ValueError)


def test_document_error():
    """Test DocumentError."""
    error = DocumentError("Failed to read JSON file")
    assert str(error) == "Failed to read JSON file"
    assert isinstance(error, IcsError)
    assert not isinstance(error, ValueError)
