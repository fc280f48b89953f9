[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nlgame"
version = "0.1.0"
description = "Gameplay helpers for an action role-playing game: tags, weapon states, movement directions and status bars"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "gameplay-tags", "combat", "hud"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nlgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
