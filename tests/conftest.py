"""Shared pytest fixtures wiring the validator to fakes."""

from __future__ import annotations

import pytest

from core.config import AppSettings
from core.services.settings_validator import ConfigValidator
from tests.fakes import FakeBrokerFactory, FakeDateParser, FakeLookupFactory


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(broker_timeout_seconds=1.5, lookup_timeout_seconds=2.5)


@pytest.fixture
def broker_factory() -> FakeBrokerFactory:
    return FakeBrokerFactory()


@pytest.fixture
def lookup_factory() -> FakeLookupFactory:
    return FakeLookupFactory()


@pytest.fixture
def date_parser() -> FakeDateParser:
    return FakeDateParser()


@pytest.fixture
def validator(settings, broker_factory, lookup_factory, date_parser) -> ConfigValidator:
    """Validator wired to fakes only (no network)."""

    return ConfigValidator(
        broker_factory=broker_factory,
        lookup_factory=lookup_factory,
        date_parser=date_parser,
        settings=settings,
    )
