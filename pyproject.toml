[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexfloat"
version = "0.1.0"
description = "Building blocks for correctly rounded decimal-to-binary float conversion: float kinds, extended floats, rounding, error estimates and limb arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["float", "ieee754", "rounding", "extended-precision", "bigint", "limbs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["lexfloat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
