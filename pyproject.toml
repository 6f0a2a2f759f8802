[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stacklab"
version = "0.1.0"
description = "Small stack and queue programs: expression evaluator, undo/redo notes, maze solver, DNA pair checker, music player, autocomplete, chat log and card deck"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "data structures", "education", "postfix", "maze", "simulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stacklab-infix = "stacklab.infix:main"
stacklab-notepad = "stacklab.notepad:main"
stacklab-maze = "stacklab.maze:main"
stacklab-dna = "stacklab.dna:main"
stacklab-player = "stacklab.player:main"
stacklab-autocomplete = "stacklab.autocomplete:main"
stacklab-chat = "stacklab.chat:main"
stacklab-cards = "stacklab.cards:main"

[tool.hatch.build.targets.wheel]
packages = ["stacklab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
