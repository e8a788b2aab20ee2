"""Shared fixtures for value node tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from pyqt_valuenodes.protocols import ValueNode


def _make_nodes(keys, tag=""):
    return [
        ValueNode(expression=key, name=f"{key}{tag}", value=index)
        for index, key in enumerate(keys)
    ]


@pytest.fixture
def make_nodes():
    """Build value nodes whose name carries tag so rebinding is observable."""
    return _make_nodes


@pytest.fixture
def ui_dispatcher(qapp):
    from pyqt_valuenodes.services import UIDispatcher

    return UIDispatcher()
