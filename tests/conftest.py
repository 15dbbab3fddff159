import pytest

import cubedsphere


@pytest.fixture
def fast(pytestconfig):
    return pytestconfig.getoption("--fast", default=False)


@pytest.fixture(params=[1, 2, 3])
def n_halo(request, fast):
    if fast and request.param == 2:
        pytest.skip("running in fast mode")
    return request.param


@pytest.fixture(params=[4, 7])
def nx(request, fast):
    if fast and request.param == 7:
        pytest.skip("running in fast mode")
    return request.param


@pytest.fixture
def nz():
    return 3


@pytest.fixture
def grid(nx, nz, n_halo):
    return cubedsphere.CubedSphereGrid(nx=nx, nz=nz, n_halo=n_halo)


@pytest.fixture
def small_grid():
    return cubedsphere.CubedSphereGrid(nx=4, nz=2, n_halo=1)


def pytest_addoption(parser):
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="run a limited suite of tests which completes quickly",
    )
