[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lbkdtree"
version = "0.1.0"
description = "Building blocks for left-balanced k-d trees: index arithmetic, subtree sizes, sorting networks and nearest-neighbour search"
requires-python = ">=3.10"
dependencies = []
keywords = ["kd-tree", "nearest-neighbour", "sorting-network", "spatial-index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["lbkdtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
