import pytest

import shamsi


@pytest.fixture
def restore_default_engine():
    """Put the registry default back after a test changes it."""
    before = shamsi.get_default_engine()
    yield
    shamsi.set_default_engine(before)
