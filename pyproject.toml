[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsadrills"
version = "0.1.0"
description = "Small array and recursion drills: merges, unions, missing elements, duplicates, pair sums, factorials, Fibonacci, Tower of Hanoi and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "recursion", "arrays", "education", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[project.scripts]
dsadrills-arrays = "dsadrills.arrays:main"
dsadrills-recursion = "dsadrills.recursion:main"

[tool.hatch.build.targets.wheel]
packages = ["dsadrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
