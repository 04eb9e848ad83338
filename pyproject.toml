[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retroapi"
version = "0.1.0"
description = "Client for the RetroAchievements web API"
requires-python = ">=3.10"
dependencies = []
keywords = ["retroachievements", "api", "client", "achievements", "retro", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["retroapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
