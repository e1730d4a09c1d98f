[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liftmath"
version = "0.1.0"
description = "Small numeric and symbolic math toolkit: matrices, linear regression, Simpson integration and vector symbols."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear regression", "integration", "numeric", "symbolic", "vectors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liftmath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
