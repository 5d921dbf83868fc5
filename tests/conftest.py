"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.draft_registry import DraftRegistry
from app.services.importer import SAMPLE_CSV


@pytest.fixture
def app() -> FastAPI:
    """Fresh app instance (and draft registry) per test."""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registry() -> DraftRegistry:
    return DraftRegistry()


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_bytes(sample_csv: str) -> bytes:
    return sample_csv.encode("utf-8")
