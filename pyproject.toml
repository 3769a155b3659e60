[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ironoxide"
version = "0.1.0"
description = "Small vector primitives, a 32-bit integer hash, a toy byte scrambler and UI layout building blocks"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "geometry", "hash", "ui", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ironoxide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
