[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashui"
version = "0.1.0"
description = "A headless smartphone-style user interface toolkit: launcher, file explorer, status bar, splash screen, animations and touch feedback drawn onto a recording canvas."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "launcher", "touch", "animation", "canvas", "mobile", "headless"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
