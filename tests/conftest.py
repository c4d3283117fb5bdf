"""
Shared pytest fixtures for Vendorize tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import pytest as _pytest

import vendorize.config as config
import vendorize.context as context_module
import vendorize.driver as driver

# Environment keys that should be cleared for isolated tests
ENV_PREFIX = "VENDORIZE_"


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Remove VENDORIZE_* variables so Settings() only sees test input."""
    for key in list(_os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@_pytest.fixture
def settings() -> config.Settings:
    """Settings with all defaults."""
    return config.Settings()


@_pytest.fixture
def store() -> config.PathConfigStore:
    """Empty store without seed data."""
    return config.PathConfigStore()


@_pytest.fixture
def seeded_store() -> config.PathConfigStore:
    """Store seeded with the bundled seed file."""
    seeded = config.PathConfigStore()
    config.seed_defaults(seeded)
    return seeded


@_pytest.fixture
def context(settings: config.Settings) -> context_module.PrefixContext:
    """Fresh context with bundled seed data and all built-in rules."""
    return context_module.create_context(settings)


@_pytest.fixture
def prefixer(context: context_module.PrefixContext) -> driver.Autoprefixer:
    """Driver bound to the fresh context."""
    return driver.Autoprefixer(context)


@_pytest.fixture
def make_context() -> _typing.Callable[..., context_module.PrefixContext]:
    """Factory for contexts with custom settings."""

    def _make(**kwargs: _typing.Any) -> context_module.PrefixContext:
        return context_module.create_context(config.Settings(**kwargs))

    return _make
