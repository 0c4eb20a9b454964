[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seamdeck"
version = "0.1.0"
description = "Content-aware image resizing by seam carving, and a four-player Euchre card game"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "seam carving",
    "image resizing",
    "ppm",
    "jpeg",
    "euchre",
    "card game",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seamdeck-resize = "seamdeck.cv.resize:main"
seamdeck-euchre = "seamdeck.euchre.game:main"

[tool.hatch.build.targets.wheel]
packages = ["seamdeck"]

[tool.hatch.build.targets.sdist]
include = [
    "seamdeck",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
