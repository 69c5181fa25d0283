"""Shared test fixtures."""

import pytest

from fieldcheck.core.config import ValidatorConfig
from fieldcheck.core.fields import FieldStore
from fieldcheck.core.registry import get_default_registry
from fieldcheck.core.types import RuleContext


@pytest.fixture(autouse=True)
def clean_default_registry():
    """Remove custom rules registered on the shared registry by a test."""
    yield
    get_default_registry().clear()


@pytest.fixture
def make_context():
    """Fixture building a rule context over the given field data."""

    def _make(data=None, **config):
        return RuleContext(store=FieldStore(data or {}), config=ValidatorConfig(**config))

    return _make


@pytest.fixture
def context(make_context):
    """Fixture providing a rule context over empty data."""
    return make_context()
