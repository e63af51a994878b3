"""
Pytest configuration and shared fixtures.

Catalog graphs are rebuilt for every test so mutations never leak.
"""

import pytest

from graphs import UTGraph
from helpers.models import GRAPHS


@pytest.fixture
def star3() -> UTGraph:
    """Three vertices, hub 2."""
    return GRAPHS[0].build()


@pytest.fixture
def isolated4() -> UTGraph:
    """Four vertices, no edges."""
    return GRAPHS[2].build()


@pytest.fixture
def star4() -> UTGraph:
    """Four vertices, hub 2."""
    return GRAPHS[3].build()


@pytest.fixture
def twelve() -> UTGraph:
    """Twelve vertices with vertex 11 isolated."""
    return GRAPHS[5].build()


@pytest.fixture(params=range(len(GRAPHS)), ids=lambda i: f"graph{i}")
def catalog_graph(request) -> UTGraph:
    """Every catalog graph in turn."""
    return GRAPHS[request.param].build()
