[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probebench"
version = "0.1.0"
description = "Benchmark open addressing and red-black-tree chaining hash tables under varying load factors"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "benchmark", "linear probing", "double hashing", "red-black tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
probebench = "probebench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["probebench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
