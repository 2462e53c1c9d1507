[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uutkit"
version = "0.1.0"
description = "Skyline rectangle packing, small containers, hashed strings, render enums and input event dispatch"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["rectangle packing", "atlas", "skyline", "containers", "hash string", "events", "input"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["uutkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
