import io
import random
import pytest
from ratinterp import PolynomialConsole, PolynomialStore


@pytest.fixture(params=[(1, 1), (1, 4), (3, 1), (2, 3), (3, 2), (4, 4)], scope="session")
def zero_shape(request: pytest.FixtureRequest) -> tuple:
    """Provide session-level fixture for shapes of all-zero matrices."""
    return request.param


@pytest.fixture(params=[0, 1, 2, 3], scope="session")
def seed(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for seeds of random test systems."""
    return request.param


@pytest.fixture
def rng(seed) -> random.Random:
    return random.Random(seed)


@pytest.fixture
def store() -> PolynomialStore:
    return PolynomialStore()


@pytest.fixture
def console_out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(store, console_out) -> PolynomialConsole:
    """Console that writes into a string buffer."""
    return PolynomialConsole(store, out=console_out)
