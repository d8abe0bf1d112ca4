[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cobrinha"
version = "0.1.0"
description = "A classic snake arcade game with bonus fruits, a scoreboard and a start menu"
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cobrinha = "cobrinha.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cobrinha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
