[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdrills"
version = "0.1.0"
description = "Small numeric and decision drills: arithmetic, interest, grading, digit tricks and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "arithmetic", "number-theory", "education", "drills"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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

[project.scripts]
cdrills = "cdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cdrills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
