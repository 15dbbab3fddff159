try:
    import xarray as xr
    from xarray import DataArray
except ModuleNotFoundError as err:
    from ._optional_imports import RaiseWhenAccessed

    xr = RaiseWhenAccessed(err)
    DataArray = RaiseWhenAccessed(err)


def to_dataset(state):
    """Combine a mapping of names to quantities or fields into an xarray Dataset."""
    data_vars = {name: value.data_array for name, value in state.items()}
    return xr.Dataset(data_vars=data_vars)
