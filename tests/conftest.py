"""Pytest configuration for fieldcheck tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fieldcheck import ErrorMessages, ValidationChain  # noqa: E402


@pytest.fixture
def messages():
    """Message bundle used across chain tests."""
    return ErrorMessages(required="field is required", invalid="field is invalid")


@pytest.fixture
def errors():
    """Fresh caller-owned error list."""
    return []


@pytest.fixture
def chain():
    """Unbound chain using the default schemas."""
    return ValidationChain()
