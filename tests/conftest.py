"""
Shared test configuration.
Tests build their own BookingStore with a fixed id factory so responses are deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from main import create_app  # noqa: E402
from store import BookingStore  # noqa: E402


@pytest.fixture
def store() -> BookingStore:
    return BookingStore(id_factory=lambda: "1")


@pytest.fixture
def client(store: BookingStore) -> TestClient:
    return TestClient(create_app(store=store))
