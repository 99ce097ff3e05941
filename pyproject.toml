[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethscan-types"
version = "0.0.4"
description = "Typed value objects for parsing Etherscan-style API JSON replies"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethereum", "etherscan", "blockchain", "json", "api"]
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
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ethscan_types"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
