[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numwords"
version = "0.1.0"
description = "Spell out non-negative integers in words using a plain-text number dictionary"
requires-python = ">=3.10"
dependencies = []
keywords = ["numbers", "words", "spelling", "dictionary", "cardinal"]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numwords = "numwords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numwords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
