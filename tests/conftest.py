"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.
    
    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """
    Return the test fixtures directory path.
    
    Returns:
        Path: Absolute path to the directory holding saved gateway responses.
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path) -> Callable[[str], bytes]:
    """
    Return a loader for saved gateway response payloads.
    
    Args:
        fixtures_dir: Test fixtures directory fixture.
    
    Returns:
        Callable taking a fixture file name and returning its raw bytes.
    """
    def _load(name: str) -> bytes:
        return (fixtures_dir / name).read_bytes()
    return _load


@pytest.fixture
def ok_envelope() -> dict[str, Any]:
    """
    Return a successful envelope block as found in every "Ok" response.
    
    Returns:
        dict: Raw ``messages`` block with resultCode Ok.
    """
    return {
        "resultCode": "Ok",
        "message": [{"code": "I00001", "text": "Successful."}],
    }


@pytest.fixture
def error_envelope() -> dict[str, Any]:
    """
    Return an error envelope block for an unsuccessful transaction.
    
    Returns:
        dict: Raw ``messages`` block with resultCode Error and code E00027.
    """
    return {
        "resultCode": "Error",
        "message": [{"code": "E00027", "text": "The transaction was unsuccessful."}],
    }
