from setuptools import setup, find_packages

setup(
    name="windward",
    version="0.1.0",
    description="Per-tick sailing vessel motion over a geographic surface",
    author="James Hancock",
    author_email="j.hancock354@gmail.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "xarray>=2023.12.0",
        "cdsapi>=0.6.1",
        "cfgrib>=0.9.10.4",
        "cartopy>=0.22.0",
        "shapely>=2.0.0",
        "geopandas>=0.14.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
)
