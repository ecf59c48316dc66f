import pytest

from helpers import PARIS_TEXT, luminance_for_runs, runs_for_text


@pytest.fixture
def paris_runs():
    return runs_for_text(PARIS_TEXT)


@pytest.fixture
def paris_luminance(paris_runs):
    return luminance_for_runs(paris_runs)
