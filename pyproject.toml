[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "editmodes"
version = "0.1.0"
description = "Emacs and Vi style parsing of terminal key events into line-editor events"
requires-python = ">=3.10"
dependencies = []
keywords = ["line-editor", "keybindings", "vi", "emacs", "terminal"]
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
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["editmodes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
