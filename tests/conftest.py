"""Shared pytest fixtures."""

import os

import pytest
from hypothesis import settings

from huecolor import GAMUTS

settings.register_profile(
    "ci", max_examples=1000, deadline=1000.0  # Milliseconds
)
settings.load_profile("ci" if os.getenv("CI") else "default")


@pytest.fixture(params=list(GAMUTS), ids=lambda gamut_type: gamut_type.name)
def gamut(request):
    """Each of the shipped gamuts."""
    return GAMUTS[request.param]
