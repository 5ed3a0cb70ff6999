[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kdutils"
version = "0.1.0"
description = "Small utilities: byte arrays with base64, bit flags, elapsed timers, directories, URLs, files, memory-mapped files and category loggers."
requires-python = ">=3.10"
dependencies = []
keywords = ["bytearray", "base64", "flags", "timer", "url", "file", "mmap", "logging"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kdutils"]

[tool.pytest.ini_options]
addopts = "-ra"
