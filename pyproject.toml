[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kitext"
version = "0.1.0"
description = "Text-editor building blocks: gap buffer, Boyer-Moore search, string and number helpers, path helpers, INI settings and buffered file I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "gap buffer", "boyer-moore", "ini", "search"]
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
    "Topic :: Text Editors",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kitext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
