"""Shared fixtures and markers for PIN tests."""

import os

import pytest
from hypothesis import settings

from pin import Identifier, Side, State

settings.register_profile("ci", max_examples=1000)
settings.register_profile("dev", max_examples=100)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    config.addinivalue_line("markers", "security: adversarial / non-ASCII input")


@pytest.fixture
def king():
    """First-side normal non-terminal king: "K"."""
    return Identifier("K", Side.FIRST)


@pytest.fixture
def all_valid_tokens():
    """Every valid token: 26 letters x 2 sides x 3 states x 2 terminal flags."""
    tokens = []
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        for cased in (letter, letter.lower()):
            for prefix in ("", "+", "-"):
                for suffix in ("", "^"):
                    tokens.append(prefix + cased + suffix)
    return tokens
