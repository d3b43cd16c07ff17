"""
--------------------------------------------------------------------------------
<editer project>
src/editer/tests/conftest.py

Shared backends for walk tests: every container kind the registry knows,
built from the same items and read back as a plain list.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from collections import UserList, deque

import logging

import numpy as np
import pytest

from editer import BoundedList, NumpyVector
from editer.config import reset

BACKENDS = {
    "list": list,
    "deque": deque,
    "userlist": UserList,
    "bounded": lambda items: BoundedList(64, items),
    "numpy": lambda items: NumpyVector(items, dtype=np.int64),
}


def _as_list(container) -> list:
    if isinstance(container, NumpyVector):
        return container.tolist()
    return list(container)


@pytest.fixture
def as_list():
    return _as_list


@pytest.fixture(params=sorted(BACKENDS))
def make(request):
    return BACKENDS[request.param]


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    monkeypatch.delenv("EDITER_TRACE", raising=False)
    monkeypatch.delenv("EDITER_LOG_LEVEL", raising=False)
    names = ["editer", "editer.engine", "editer.registry"]
    levels = {n: logging.getLogger(n).level for n in names}
    yield
    reset()
    for n, level in levels.items():
        logging.getLogger(n).setLevel(level)
