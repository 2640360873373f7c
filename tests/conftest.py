import pytest
from bigrational import FixedBigRational, FloatingBigRational, Configuration
from bigrational.names import *

rational_classes = [FixedBigRational, FloatingBigRational]


@pytest.fixture(params=rational_classes, scope="session")
def rational_class(request: pytest.FixtureRequest):
    """Provide session-level fixture for parametrized rational classes."""
    return request.param


@pytest.fixture(params=rational_classes, scope="session")
def companion(request: pytest.FixtureRequest):
    """Provide session-level fixture for the factories of both rational classes."""
    return request.param.companion


@pytest.fixture(scope="session")
def NaN():
    return FloatingBigRational.NaN


@pytest.fixture(scope="session")
def POS_INF():
    return FloatingBigRational.POSITIVE_INFINITY


@pytest.fixture(scope="session")
def NEG_INF():
    return FloatingBigRational.NEGATIVE_INFINITY


@pytest.fixture
def unicode_display():
    """Switch rendering to the unicode display mode for one test."""
    conf = Configuration()
    previous = conf.display_mode
    conf.display_mode = UNICODE
    yield conf
    conf.display_mode = previous
