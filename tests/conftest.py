"""Pytest fixtures for tests."""

import pytest

from tonal_scheme import Palette, Scheme


@pytest.fixture
def blue_palette():
    """10-step palette of #3463EB bounded to [0.1, 0.9]."""
    return Palette.create("#3463eb", 10, min=0.1, max=0.9)


@pytest.fixture
def role_palette():
    """101-step role palette of #1677FF."""
    return Palette.create("#1677FF", 101)


@pytest.fixture(scope="module")
def purple_scheme():
    """Scheme built from #9371ED with default options."""
    return Scheme("#9371ED")


@pytest.fixture(scope="module")
def blue_scheme():
    """Scheme built from #1677FF with default options."""
    return Scheme("#1677FF")
