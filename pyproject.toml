[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coffeesim"
version = "0.1.0"
description = "A simulated coffee machine with recipes, inventory, payment, brewing, maintenance and an event log."
requires-python = ">=3.10"
dependencies = []
keywords = ["coffee", "simulation", "vending", "observer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coffeesim = "coffeesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coffeesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
