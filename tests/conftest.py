import pytest

from figletkit.utils import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
