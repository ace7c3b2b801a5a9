[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "e2ekit"
version = "0.1.0"
description = "Building blocks for end-to-end test suites: environment configuration, command-line flags and feature definitions."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "e2e", "end-to-end", "features", "assessments", "flags"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["e2ekit"]

[tool.pytest.ini_options]
addopts = "-ra"
