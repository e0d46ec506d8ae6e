[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvdoc"
version = "0.1.0"
description = "Read, edit and write CSV documents with column and row labels and typed cell access"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "table", "spreadsheet", "parser", "labels", "utf-16"]
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
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["csvdoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
