[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordbytes"
version = "0.1.0"
description = "Byte-level operations on 64-bit words and newline conversion for UTF-16 text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["bytes", "endianness", "utf-16", "newlines", "line-endings", "byte-order"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
wordbytes-selfcheck = "wordbytes.wordops:main"
utf16-newlines = "wordbytes.newlines:main"

[tool.hatch.build.targets.wheel]
packages = ["wordbytes"]

[tool.pytest.ini_options]
addopts = "-ra"
