"""Shared fixtures: a small view hierarchy."""

import pytest

from pinlayout import Frame, View


@pytest.fixture
def container() -> View:
    """A fixed-frame container view."""
    return View("container", Frame.from_values(0, 0, 200, 100))


@pytest.fixture
def child(container: View) -> View:
    """A subview of the container without a frame."""
    return container.add_subview(View("child"))


@pytest.fixture
def sibling(container: View) -> View:
    """A fixed-frame subview of the container."""
    return container.add_subview(View("sibling", Frame.from_values(10, 20, 50, 30)))
