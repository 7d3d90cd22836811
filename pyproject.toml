[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quillmark"
version = "2.1.2"
description = "Building blocks for a Markdown writing tool: export formats, command-line exporter definitions, find and replace, documents and a block-level syntax tree."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "markdown",
    "editor",
    "export",
    "pandoc",
    "multimarkdown",
    "cmark",
    "find-replace",
    "syntax-tree",
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
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quillmark"]

[tool.hatch.build.targets.sdist]
include = ["quillmark", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
