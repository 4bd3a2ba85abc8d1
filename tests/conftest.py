import pathlib as pl

import pytest

from tap.options import TapOptions


@pytest.fixture
def options():
    def _options(path: pl.Path | str = "unused", **kwargs) -> TapOptions:
        return TapOptions(paths=(str(path),), **kwargs)

    return _options
