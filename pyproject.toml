[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textprint"
version = "0.1.0"
description = "Building blocks for printing text files: end-of-line aware line reading, style sheet selection, delegation to other applications, version numbers and job reports"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "postscript",
    "printing",
    "end-of-line",
    "delegation",
    "style-sheets",
    "text",
]
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
    "Topic :: Printing",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["textprint"]

[tool.pytest.ini_options]
addopts = "-ra"
