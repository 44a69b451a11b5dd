[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hogengine"
version = "0.1.0"
description = "A small 2D game engine with game states, input handling and an orthographic sprite renderer"
requires-python = ">=3.10"
keywords = ["game", "engine", "pygame", "2d", "game-state"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hogengine-demo = "hogengine.mainmenu:main"

[tool.hatch.build.targets.wheel]
packages = ["hogengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
