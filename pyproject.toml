[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ci-editor"
version = "0.0.1"
description = "A small terminal text editor with raw-mode input, scrolling and a status bar"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "tty", "vt100"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ci = "ci_editor.terminal:main"

[tool.setuptools.packages.find]
include = ["ci_editor*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
