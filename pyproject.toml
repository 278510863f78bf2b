[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferrolings"
version = "5.4.1"
description = "Worked lessons for small programming exercises, with terminal status messages and rust-project.json generation"
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = ["exercises", "learning", "lessons", "rust-analyzer", "rust-project"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ferrolings"]

[tool.hatch.build.targets.sdist]
include = [
    "ferrolings",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
