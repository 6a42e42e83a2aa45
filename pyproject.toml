[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxrecip"
version = "1.0.0"
description = "Fixed-point 64-bit reciprocals for replacing division by a constant with multiplication"
requires-python = ">=3.10"
dependencies = []
keywords = ["reciprocal", "division", "fixed-point", "integer", "uint64"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rxrecip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
