[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapelab"
version = "0.1.0"
description = "Plane figures with an interactive console, a 3D surface mesh with affine transforms, and a small dense matrix type"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "figures", "perimeter", "matrix", "affine transform", "surface", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shapelab-figures = "shapelab.figures.commands:main"
shapelab-matrix = "shapelab.matrix:main"

[tool.hatch.build.targets.wheel]
packages = ["shapelab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
