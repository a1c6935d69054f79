[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falcorules"
version = "0.1.0"
description = "Building blocks for runtime security rules: rule records, load results with source locations, statistics and YAML configuration access"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["security", "rules", "yaml", "runtime-security", "detection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["falcorules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
