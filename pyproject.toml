[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dosfloppy"
version = "0.1.0"
description = "Building blocks for MS-DOS floppy tools: floppyd wire encoding, geometry, wildcards, locking and listing formatters"
requires-python = ">=3.10"
dependencies = []
keywords = ["floppy", "floppyd", "fat", "msdos", "disk", "geometry", "wildcard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dosfloppy"]

[tool.pytest.ini_options]
addopts = "-ra"
