"""Shared test fixtures for the Hatena Blog client tests"""

import os
import sys

import httpx
import pytest

sys.path.insert(0, os.path.dirname(__file__))

from factories import FakeBlogAPI  # noqa: E402

from hatenablog_members.client import HatenaBlogClient  # noqa: E402


@pytest.fixture
def api():
    """Fake API with no routes registered"""
    return FakeBlogAPI()


@pytest.fixture
def client(api):
    """Client wired to the fake API"""
    with HatenaBlogClient(
        "test",
        "username",
        "apikey",
        "owner",
        "blog.example.com",
        transport=httpx.MockTransport(api)
    ) as c:
        yield c


@pytest.fixture
def clean_env(monkeypatch):
    """Remove HATENABLOG_* variables so settings come only from the test"""
    for key in list(os.environ):
        if key.upper().startswith("HATENABLOG_"):
            monkeypatch.delenv(key)
