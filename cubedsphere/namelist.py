import dataclasses
import os
from typing import Mapping, Union

import f90nml

from .constants import N_HALO_DEFAULT


@dataclasses.dataclass(frozen=True)
class CubedSphereNamelist:
    """Grid settings read from the fv_core_nml group of a Fortran namelist."""

    nx: int
    """cell centers along each face edge (npx - 1 in the namelist)"""
    nz: int = 1
    """vertical levels (npz in the namelist)"""
    n_halo: int = N_HALO_DEFAULT
    """halo width, optional in the namelist"""

    @classmethod
    def from_dict(cls, namelist: Mapping) -> "CubedSphereNamelist":
        """Read settings from a nested mapping of namelist groups.

        Args:
            namelist: mapping with an "fv_core_nml" group containing at least npx
        """
        try:
            core = namelist["fv_core_nml"]
        except KeyError:
            raise KeyError("namelist has no fv_core_nml group")
        # npx counts cell corners along a face edge, npz counts mid levels
        return cls(
            nx=int(core["npx"]) - 1,
            nz=int(core.get("npz", 1)),
            n_halo=int(core.get("n_halo", N_HALO_DEFAULT)),
        )

    @classmethod
    def from_f90nml(cls, namelist: f90nml.Namelist) -> "CubedSphereNamelist":
        return cls.from_dict(namelist.todict())

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "CubedSphereNamelist":
        """Read settings from a Fortran namelist file such as input.nml."""
        return cls.from_f90nml(f90nml.read(os.fspath(path)))
