[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sceneshapes"
version = "0.1.0"
description = "Editable 2D shape items (line, circle, polygon, rectangles, ring, arc) with geometry helpers, input validators, an async logger and host utilities"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["geometry", "shapes", "graphics", "editor", "annotation", "validators", "logging"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sceneshapes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
