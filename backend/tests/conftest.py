"""Shared fixtures: app built with explicit settings and a scripted model client."""

import os

import pytest
from fastapi.testclient import TestClient

# Never reach the real backend from tests
os.environ.setdefault("GEMINI_API_KEY", "test-fake-key")

from multiapi.config import Settings  # noqa: E402
from multiapi.main import create_app  # noqa: E402
from tests.fake_model import FakeModelClient  # noqa: E402


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", gemini_model="gemini-test")


@pytest.fixture
def fake_model():
    return FakeModelClient()


@pytest.fixture
def client(settings, fake_model):
    app = create_app(settings=settings, model_client=fake_model)
    with TestClient(app) as c:
        yield c
