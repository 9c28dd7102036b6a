[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolve"
version = "0.1.0"
description = "Solvers for five competitive-programming problems plus small number-theory, union-find and graph helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "union-find", "number-theory", "prefix-sums", "binary-search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolve-a = "cpsolve.problem_a:main"
cpsolve-b = "cpsolve.problem_b:main"
cpsolve-c = "cpsolve.problem_c:main"
cpsolve-d = "cpsolve.problem_d:main"
cpsolve-omg-graph = "cpsolve.omg_graph:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
