from typing import List

from setuptools import find_packages, setup


setup_requirements: List[str] = []

requirements = [
    "numpy>=1.17.0",
    "typing_extensions>=3.7.4",
    "f90nml>=1.1.0",
]

test_requirements = ["pytest"]

with open("README.md") as readme_file:
    readme = readme_file.read()


with open("HISTORY.md") as history_file:
    history = history_file.read()

setup(
    author="Allen Institute of Artificial Intelligence",
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
    ],
    description="in-memory halo filling for fields on the six faces of a cubed sphere",
    install_requires=requirements,
    setup_requires=setup_requirements,
    tests_require=test_requirements,
    extras_require={
        "netcdf": ["xarray>=0.15.1", "scipy>=1.3.1"],
        "test": test_requirements,
    },
    name="cubedsphere-halo",
    license="BSD license",
    long_description=readme + "\n\n" + history,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cubedsphere", "cubedsphere.*"]),
    include_package_data=True,
    version="0.1.0",
    zip_safe=False,
)
