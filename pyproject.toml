[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frankenstein_player"
version = "1.0.0"
description = "Media library entities, JSON configuration and a playback queue for a music player"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "player", "playlist", "playback", "queue", "library"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frankenstein_player"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
