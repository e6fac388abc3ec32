[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrainpath"
version = "0.1.0"
description = "Measure the surface distance along a straight path across a gridded elevation map."
requires-python = ">=3.10"
dependencies = []
keywords = ["terrain", "elevation", "heightmap", "distance", "gis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
terrainpath = "terrainpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["terrainpath"]

[tool.pytest.ini_options]
addopts = "-ra"
