[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pablaide"
version = "0.1.0"
description = "A small Tk code editor with keyword highlighting, colour themes and a command terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "ide", "syntax-highlighting", "tkinter", "themes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pablaide = "pablaide.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["pablaide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
