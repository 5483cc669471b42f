[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lucklyst"
version = "0.1.0"
description = "A lucky-draw game: enter customers, shake the tree, and see whose fruit lands first."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "lucky draw", "raffle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
lucklyst = "lucklyst.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lucklyst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
