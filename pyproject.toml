[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyfix"
version = "1.0.0"
description = "Fix text typed with the wrong keyboard layout, switching between Arabic and English."
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard", "layout", "arabic", "english", "transliteration", "clipboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Arabic",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
keyfix = "keyfix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["keyfix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
