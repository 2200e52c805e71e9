[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestbook"
version = "0.1.0"
description = "Solutions to classic competitive-programming problems as plain Python functions, with a command-line solver."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "competitive-programming",
    "algorithms",
    "greedy",
    "binary-search",
    "graphs",
    "two-pointers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
contestbook = "contestbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contestbook"]

[tool.pytest.ini_options]
addopts = "-ra"
