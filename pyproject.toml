[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novakit"
version = "0.1.0"
description = "Small building blocks: value-or-error results, binary data views, sorted maps, dimensioned measures, random helpers and timing loops"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "measure", "binary", "flat-map", "random", "expected", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["novakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
