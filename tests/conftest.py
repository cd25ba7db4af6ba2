import os

import django
import pytest

# Configure Django before importing the app
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")
django.setup()


@pytest.fixture
def two_cycles():
    from sccscope.types import Graph

    return Graph([[1], [2], [0], [4], [5], [3]])


@pytest.fixture
def cycle_with_exit():
    from sccscope.types import Graph

    return Graph([[1], [2], [3, 4], [1], []])
