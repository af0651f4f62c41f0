[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protobom"
version = "0.1.0"
description = "A format-neutral graph model for Software Bill of Materials data, with diffing, merging, querying, storage and a pluggable writer."
requires-python = ">=3.10"
dependencies = []
keywords = ["sbom", "spdx", "cyclonedx", "supply-chain", "software-bill-of-materials"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protobom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
