"""Configures pytest further."""
import pytest

from rsamath import randomness


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture
def rng() -> randomness.SeededRandomSource:
    """Seeded source, so failures reproduce."""
    return randomness.SeededRandomSource(20250917)


@pytest.fixture
def fixed_witness(mocker):
    """Builds a source that always draws the given value."""

    def make(value: int):
        source = mocker.Mock(spec=randomness.SeededRandomSource)
        source.random_in_range.return_value = value
        return source

    return make
