[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flatgeom"
version = "0.1.0"
description = "Geometry types for geospatial applications, stored as flat coordinate lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "gis", "geospatial", "polygon", "linestring", "coordinates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["flatgeom"]

[tool.pytest.ini_options]
addopts = "-ra"
