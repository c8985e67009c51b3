[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starjumper"
version = "0.1.0"
description = "Generate worlds and subsectors for classic science-fiction role-playing games"
requires-python = ">=3.10"
keywords = ["rpg", "role-playing", "world-generation", "subsector", "dice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
worldgen = "starjumper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["starjumper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
