[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linecount"
version = "0.3.14"
description = "Count lines of code in a directory tree, grouped by language."
requires-python = ">=3.10"
dependencies = []
keywords = ["count", "lines", "lines-of-code", "loc", "cli"]
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
    "Topic :: Software Development",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linecount = "linecount.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linecount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
