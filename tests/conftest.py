"""
Pytest configuration for typerw tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE=ci)
- A registry fixture that restores the standard catalog after a test
  registers its own operations
"""

import os

import pytest
from hypothesis import settings, HealthCheck

from typerw.operation_registry import clear_registry

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - recursion-heavy properties are slow per example; the deadline is off

settings.register_profile(
    "default",
    print_blob=True,
    deadline=None,
    max_examples=60,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "ci",
    print_blob=True,
    deadline=None,
    max_examples=200,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared fixtures
# =============================================================================

@pytest.fixture
def fresh_registry():
    """Clean slate before and after; the standard catalog re-seeds lazily."""
    clear_registry()
    yield
    clear_registry()
