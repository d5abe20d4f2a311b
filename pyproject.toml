[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quilleditor"
version = "0.1.0"
description = "A small plain-text editor with a menu-driven console front end and a Tk window front end."
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "editor", "console", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications :: Tk",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
quilleditor = "quilleditor.console:main"

[project.gui-scripts]
quilleditor-gui = "quilleditor.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["quilleditor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
