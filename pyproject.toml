[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "counterstrike_sim"
version = "0.1.0"
description = "A small turn-based simulation of terrorist and counter-terrorist teams duelling with guns, armor and bombs."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "teams", "combat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["counterstrike_sim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
