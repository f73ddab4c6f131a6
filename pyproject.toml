[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baize"
version = "0.1.0"
description = "Core of a Markdown note editor: menu model, LaTeX-to-Markdown rendering, logging and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "editor", "latex", "notes", "menu"]
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
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Natural Language :: Chinese (Simplified)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["baize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
