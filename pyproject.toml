[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holidaycal"
version = "2.0.0"
description = "Holiday definitions and observance calculations for a number of countries"
requires-python = ">=3.10"
dependencies = []
keywords = ["holiday", "calendar", "easter", "bank holiday", "public holiday"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["holidaycal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
