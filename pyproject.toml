[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "biringan"
version = "0.1.0"
description = "Escape from Biringan City: screens and parts of a story-driven visual novel built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["visual novel", "game", "pygame", "dialogue", "story"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["biringan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
