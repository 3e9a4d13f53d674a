"""Shared pytest fixtures for vec2d tests."""

import pytest

from vec2d import FieldVector, IndexedVector, ReducedPrecisionVector


ALL_VECTORS = [IndexedVector, ReducedPrecisionVector, FieldVector]

# Implementations that keep full double precision
EXACT_VECTORS = [IndexedVector, FieldVector]


@pytest.fixture(params=ALL_VECTORS, ids=lambda cls: cls.__name__)
def ctor(request):
    """Each test using this fixture runs once per implementation."""
    return request.param


@pytest.fixture(params=EXACT_VECTORS, ids=lambda cls: cls.__name__)
def exact_ctor(request):
    return request.param
