import random
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

import cubedsphere


SCALAR_DIMS = [
    pytest.param(
        (cubedsphere.X_DIM, cubedsphere.Y_DIM, cubedsphere.Z_DIM), id="center"
    ),
    pytest.param(
        (cubedsphere.X_INTERFACE_DIM, cubedsphere.Y_INTERFACE_DIM, cubedsphere.Z_DIM),
        id="corner",
    ),
    pytest.param(
        (cubedsphere.X_DIM, cubedsphere.Y_DIM, cubedsphere.Z_INTERFACE_DIM),
        id="z_interface",
    ),
    pytest.param((cubedsphere.X_DIM, cubedsphere.Y_DIM), id="2d"),
]


@pytest.fixture(params=SCALAR_DIMS)
def dims(request):
    return request.param


@pytest.fixture
def field(grid, dims):
    field = grid.zeros(dims, units="K")
    fill_with_random_values(field, seed=0)
    return field


def fill_with_random_values(field, seed):
    state = np.random.RandomState(seed)
    for _, quantity in field:
        quantity.view[:] = state.uniform(size=quantity.extent)


def expected_halo(source: np.ndarray, side, rotated: bool) -> np.ndarray:
    """Loop-by-loop halo contents for data indexed [x, y, ...]."""
    if not rotated:
        return source.copy()
    shape = (source.shape[1], source.shape[0]) + source.shape[2:]
    result = np.empty(shape, dtype=source.dtype)
    for a in range(shape[0]):
        for b in range(shape[1]):
            if side in (cubedsphere.WEST, cubedsphere.EAST):
                result[a, b] = source[shape[1] - 1 - b, a]
            else:
                result[a, b] = source[b, shape[0] - 1 - a]
    return result


def all_expected_halos(field):
    expected = {}
    for (face, side), boundary in field.boundaries.items():
        source = boundary.send_view(field.face(boundary.to_face))
        expected[(face, side)] = expected_halo(source, side, boundary.rotated)
    return expected


def assert_halos_equal(field, expected):
    for (face, side), halo in expected.items():
        np.testing.assert_array_equal(
            cubedsphere.halo_view(field.face(face), side),
            halo,
            err_msg=f"face {face} {side.value} halo",
        )


def test_scalar_updater_has_one_copy_per_halo(small_grid):
    field = small_grid.zeros([cubedsphere.X_DIM, cubedsphere.Y_DIM], units="")
    updater = cubedsphere.ScalarHaloUpdater.from_field(field)
    assert len(updater) == 24


def test_fill_halo_regions(field):
    expected = all_expected_halos(field)
    cubedsphere.fill_halo_regions(field)
    assert_halos_equal(field, expected)


def test_fill_does_not_change_compute_domain(field):
    before = [quantity.view.copy() for _, quantity in field]
    cubedsphere.fill_halo_regions(field)
    for original, (_, quantity) in zip(before, field):
        np.testing.assert_array_equal(quantity.view, original)


def test_same_dimension_edges_copy_exactly(field):
    cubedsphere.fill_halo_regions(field)
    for (face, side), boundary in field.boundaries.items():
        if not boundary.rotated:
            np.testing.assert_array_equal(
                boundary.recv_view(field.face(face)),
                boundary.send_view(field.face(boundary.to_face)),
            )


def test_fill_halo_regions_is_idempotent(field):
    cubedsphere.fill_halo_regions(field)
    once = [quantity.data.copy() for _, quantity in field]
    cubedsphere.fill_halo_regions(field)
    for first, (_, quantity) in zip(once, field):
        np.testing.assert_array_equal(quantity.data, first)


def test_reused_updater_matches_fill_halo_regions(grid, dims):
    reused = grid.zeros(dims, units="K")
    rebuilt = grid.zeros(dims, units="K")
    updater = cubedsphere.ScalarHaloUpdater.from_field(reused)
    for step in range(3):
        fill_with_random_values(reused, seed=step)
        fill_with_random_values(rebuilt, seed=step)
        cubedsphere.fill_vertical_halo_regions(reused)
        updater.update()
        cubedsphere.fill_halo_regions(rebuilt)
        for (_, expected), (_, result) in zip(rebuilt, reused):
            np.testing.assert_array_equal(result.data, expected.data)


def test_executor_gives_same_result(grid, dims):
    sequential = grid.zeros(dims, units="K")
    parallel = grid.zeros(dims, units="K")
    fill_with_random_values(sequential, seed=1)
    fill_with_random_values(parallel, seed=1)
    cubedsphere.fill_halo_regions(sequential)
    with ThreadPoolExecutor(max_workers=4) as executor:
        cubedsphere.fill_halo_regions(parallel, executor=executor)
    for (_, expected), (_, result) in zip(sequential, parallel):
        np.testing.assert_array_equal(result.data, expected.data)


def test_copy_order_does_not_matter(grid, dims):
    ordered = grid.zeros(dims, units="K")
    shuffled = grid.zeros(dims, units="K")
    fill_with_random_values(ordered, seed=2)
    fill_with_random_values(shuffled, seed=2)
    cubedsphere.ScalarHaloUpdater.from_field(ordered).update()
    copies = cubedsphere.ScalarHaloUpdater.from_field(shuffled).copies
    random.Random(0).shuffle(copies)
    cubedsphere.HaloUpdater(copies).update()
    for (_, expected), (_, result) in zip(ordered, shuffled):
        np.testing.assert_array_equal(result.data, expected.data)


def test_unrotated_edge_end_to_end(small_grid):
    field = small_grid.zeros([cubedsphere.X_DIM, cubedsphere.Y_DIM], units="")
    cubedsphere.boundary_view(field.face(1), cubedsphere.EAST)[:] = 7.0
    cubedsphere.fill_halo_regions(field)
    np.testing.assert_array_equal(
        cubedsphere.halo_view(field.face(2), cubedsphere.WEST), 7.0
    )
    np.testing.assert_array_equal(
        cubedsphere.halo_view(field.face(2), cubedsphere.EAST), 0.0
    )


def test_rotated_edge_end_to_end(small_grid):
    # face 3 west boundary runs south to north, face 1 north halo east to west
    field = small_grid.zeros([cubedsphere.X_DIM, cubedsphere.Y_DIM], units="")
    cubedsphere.boundary_view(field.face(3), cubedsphere.WEST)[:] = np.arange(
        4.0
    ).reshape(1, 4)
    cubedsphere.fill_halo_regions(field)
    np.testing.assert_array_equal(
        cubedsphere.halo_view(field.face(1), cubedsphere.NORTH),
        [[3.0], [2.0], [1.0], [0.0]],
    )


def test_corner_halo_points_are_not_filled(small_grid):
    field = small_grid.ones([cubedsphere.X_DIM, cubedsphere.Y_DIM], units="")
    for _, quantity in field:
        quantity.data[0, 0] = -1.0
    cubedsphere.fill_halo_regions(field)
    for _, quantity in field:
        assert quantity.data[0, 0] == -1.0


@pytest.mark.parametrize(
    "dims",
    [
        pytest.param(
            [cubedsphere.X_INTERFACE_DIM, cubedsphere.Y_DIM, cubedsphere.Z_DIM],
            id="u",
        ),
        pytest.param(
            [cubedsphere.X_DIM, cubedsphere.Y_INTERFACE_DIM, cubedsphere.Z_DIM],
            id="v",
        ),
    ],
)
def test_velocity_component_is_not_a_scalar(small_grid, dims):
    field = small_grid.zeros(dims, units="m/s")
    with pytest.raises(cubedsphere.UnsupportedLocationError):
        cubedsphere.ScalarHaloUpdater.from_field(field)
    with pytest.raises(cubedsphere.UnsupportedLocationError):
        cubedsphere.fill_halo_regions(field)


def test_halo_copy_rejects_mismatched_shapes():
    copy = cubedsphere.HaloCopy(
        destination=np.zeros((2, 3)),
        source=np.zeros((3, 3)),
        dims=[cubedsphere.X_DIM, cubedsphere.Y_DIM],
        side=cubedsphere.WEST,
        rotated=False,
        description="test halo",
    )
    with pytest.raises(cubedsphere.HaloShapeError, match="test halo"):
        copy()


def test_halo_copy_applies_sign():
    destination = np.zeros((2, 3))
    copy = cubedsphere.HaloCopy(
        destination=destination,
        source=np.ones((2, 3)),
        dims=[cubedsphere.X_DIM, cubedsphere.Y_DIM],
        side=cubedsphere.EAST,
        rotated=False,
        sign=-1,
    )
    copy()
    np.testing.assert_array_equal(destination, -1.0)


def test_update_is_timed(small_grid):
    field = small_grid.zeros([cubedsphere.X_DIM, cubedsphere.Y_DIM], units="")
    timer = cubedsphere.Timer()
    updater = cubedsphere.ScalarHaloUpdater.from_field(field, optional_timer=timer)
    updater.update()
    updater.update()
    assert timer.hits == {"halo_copy": 2}
