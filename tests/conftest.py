"""Shared fixtures"""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

SOURCE_DIR = Path(__file__).parent / "source"


@pytest.fixture
def hello_payload() -> bytes:
    return (SOURCE_DIR / "dictionaryapi_hello_response.json").read_bytes()


@pytest.fixture
def hello_data(hello_payload):
    return json.loads(hello_payload)


@pytest.fixture
def not_found_payload() -> bytes:
    return (SOURCE_DIR / "dictionaryapi_not_found_response.json").read_bytes()


@pytest.fixture
def plain_console():
    """Console that writes uncoloured text to an in-memory buffer"""
    return Console(file=io.StringIO(), color_system=None, highlight=False, width=80)
