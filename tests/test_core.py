import pytest

from sccscope.types import Algorithm, InvalidAlgorithmError
from sccscope.utils.core import (
    DEFAULT_PALETTE,
    get_default_algorithm,
    get_graph_payloads,
    get_palette,
)


class TestSettings:
    def test_defaults(self):
        assert get_palette() == DEFAULT_PALETTE
        assert get_default_algorithm() is Algorithm.KOSARAJU
        assert get_graph_payloads() is None

    def test_palette(self, settings):
        settings.SCCSCOPE_PALETTE = ("red", "blue")

        assert get_palette() == ["red", "blue"]

    def test_empty_palette(self, settings):
        settings.SCCSCOPE_PALETTE = []

        with pytest.raises(ValueError):
            get_palette()

    def test_default_algorithm(self, settings):
        settings.SCCSCOPE_DEFAULT_ALGORITHM = "Tarjan"

        assert get_default_algorithm() is Algorithm.TARJAN

    def test_invalid_default_algorithm(self, settings):
        settings.SCCSCOPE_DEFAULT_ALGORITHM = "bfs"

        with pytest.raises(InvalidAlgorithmError):
            get_default_algorithm()
