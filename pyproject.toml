[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsabasics"
version = "0.1.0"
description = "Small, readable implementations of beginner algorithms: number theory, hashing, text patterns, recursion and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "education", "sorting", "recursion", "patterns", "hashing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsabasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
