[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pianodaw"
version = "0.1.0"
description = "A small digital audio workstation with a song roll, a microtonal piano roll and a mixer graph"
requires-python = ">=3.10"
keywords = ["daw", "audio", "piano roll", "midi", "microtonal", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Editors",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pianodaw = "pianodaw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pianodaw"]

[tool.pytest.ini_options]
addopts = "-ra"
