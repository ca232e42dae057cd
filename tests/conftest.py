"""Pytest configuration and shared fixtures for or-error tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample success value for testing."""
    from or_error import Ok

    return Ok(42)


@pytest.fixture
def sample_info():
    """Sample ErrorInfo with a context."""
    from or_error import ErrorInfo

    return ErrorInfo.create(ValueError('test error'), 'loading settings')


@pytest.fixture
def sample_err(sample_info):
    """Sample failure value for testing."""
    from or_error import Err

    return Err(sample_info)
