[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyramid-quest"
version = "1.0.0"
description = "A short text adventure through an unexplored pyramid, with five endings to unlock"
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "game", "interactive fiction", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Italian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pyramid-quest = "pyramid_quest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pyramid_quest"]

[tool.pytest.ini_options]
addopts = "-ra"
