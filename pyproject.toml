[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardtable"
version = "0.1.0"
description = "A small scene, layer and component framework for a card-table game"
requires-python = ">=3.10"
keywords = ["game", "cards", "scene", "components", "game-loop"]
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
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cardtable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
