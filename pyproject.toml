[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surdnest"
version = "0.1.0"
description = "Exact arithmetic on nested square-root numbers, with triangle and pentagon geometry built on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["surd", "nested radicals", "denesting", "algebraic numbers", "triangles", "pentagons", "exact arithmetic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["surdnest"]

[tool.pytest.ini_options]
addopts = "-ra"
