[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uczelnia"
version = "0.1.0"
description = "Console university system backed by SQLite: user accounts with roles, departments and login"
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "sqlite", "console", "education", "users"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uczelnia = "uczelnia.console:main"

[tool.hatch.build.targets.wheel]
packages = ["uczelnia"]

[tool.pytest.ini_options]
addopts = "-ra"
