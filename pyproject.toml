[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avrotypes"
version = "0.1.0"
description = "Resolve Avro type names to Python types and back"
requires-python = ">=3.10"
dependencies = []
keywords = ["avro", "serialization", "types", "resolver"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["avrotypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
