[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keybench"
version = "0.1.0"
description = "Hash table, weight-balanced tree and red-black tree of integer keys, with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "red-black tree", "weight-balanced tree", "benchmark", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
keybench = "keybench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["keybench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
