[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfmsession"
version = "0.1.0"
description = "Build Source Filmmaker sessions in memory and write them as DMX keyvalues2 text"
requires-python = ">=3.10"
dependencies = []
keywords = ["sfm", "source filmmaker", "dmx", "animation", "session", "keyvalues2"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sfmsession"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
