import numpy as np
import pytest

import cubedsphere


xr = pytest.importorskip("xarray")


@pytest.fixture
def field(small_grid):
    field = small_grid.zeros(
        [cubedsphere.X_DIM, cubedsphere.Y_DIM, cubedsphere.Z_DIM], units="K"
    )
    for face, quantity in field:
        quantity.view[:] = face
    return field


def test_field_data_array(field):
    data_array = field.data_array
    assert data_array.dims == (cubedsphere.TILE_DIM,) + field.dims
    assert data_array.shape == (6, 4, 4, 2)
    assert list(data_array[cubedsphere.TILE_DIM].values) == list(cubedsphere.FACES)
    assert data_array.attrs["units"] == "K"
    for face in cubedsphere.FACES:
        np.testing.assert_array_equal(
            data_array.sel({cubedsphere.TILE_DIM: face}).values, face
        )


def test_to_dataset(field):
    state = {"air_temperature": field, "surface_temperature": field.face(2)}
    dataset = cubedsphere.to_dataset(state)
    assert isinstance(dataset, xr.Dataset)
    assert set(dataset.data_vars) == {"air_temperature", "surface_temperature"}
    np.testing.assert_array_equal(dataset["surface_temperature"].values, 2.0)


def test_dataset_round_trips_through_netcdf(field, tmp_path):
    pytest.importorskip("scipy")
    path = tmp_path / "state.nc"
    cubedsphere.to_dataset({"air_temperature": field}).to_netcdf(path)
    with xr.open_dataset(path) as dataset:
        np.testing.assert_array_equal(
            dataset["air_temperature"].values, field.data_array.values
        )
        assert dataset["air_temperature"].attrs["units"] == "K"
