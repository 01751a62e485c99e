[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msrvkit"
version = "0.1.0"
description = "Search for and record the minimum supported toolchain version of a Cargo crate"
requires-python = ">=3.10"
keywords = ["msrv", "cargo", "toolchain", "bisect", "manifest"]
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
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "semver>=3.0",
    "tomlkit>=0.11",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["msrvkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
