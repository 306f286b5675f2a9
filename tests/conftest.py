"""Shared pytest fixtures for intcalc tests."""

import pytest

from intcalc.core.settings import CalculatorSettings
from intcalc.core.variables import VariableEnvironment
from intcalc.session import Session


@pytest.fixture
def env() -> VariableEnvironment:
    """Return an empty variable environment."""
    return VariableEnvironment()


@pytest.fixture
def settings() -> CalculatorSettings:
    """Return default settings, independent of the process environment."""
    return CalculatorSettings()


@pytest.fixture
def session(settings: CalculatorSettings) -> Session:
    """Return a fresh session."""
    return Session(settings=settings)
