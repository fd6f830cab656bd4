[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curveforge"
version = "0.1.0"
description = "Rates calibration toolkit: yield curve bootstrapping, bond analytics, B-splines, calendars and day counts"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "finance",
    "fixed income",
    "yield curve",
    "bootstrapping",
    "bonds",
    "bond futures",
    "day count",
    "holiday calendar",
    "b-spline",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
curveforge-bond-examples = "curveforge.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["curveforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
