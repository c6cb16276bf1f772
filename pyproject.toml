[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psxcdimg"
version = "0.1.0"
description = "Pack a directory into a PSXCD.IMG archive with its lookup tables, and unpack it again"
requires-python = ">=3.10"
dependencies = []
keywords = ["psx", "playstation", "archive", "img", "packer", "unpacker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Packaging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
psxcd-pack = "psxcdimg.packer:main"
psxcd-unpack = "psxcdimg.unpacker:main"

[tool.hatch.build.targets.wheel]
packages = ["psxcdimg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
