"""Shared fixtures: a fresh, unseeded store and an API client bound to it."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from store import CatalogStore


@pytest.fixture()
def store():
    return CatalogStore()


@pytest.fixture()
def settings():
    return Settings(seed=False)


@pytest.fixture()
def client(settings, store):
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture()
def mouse_payload():
    return {
        "name": "Razer DeathAdder V2",
        "category": "Peripherals",
        "description": "Optical mouse, 20000 DPI",
        "price": 4990,
        "stock": 20,
        "rating": 4.4,
    }
