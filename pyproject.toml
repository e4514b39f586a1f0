[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cavegen"
version = "0.1.0"
description = "Procedural cave generation with cellular automata and marching squares outlines, with an animated viewer"
requires-python = ">=3.10"
keywords = ["procedural generation", "cellular automata", "marching squares", "caves", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cavegen = "cavegen.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cavegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
