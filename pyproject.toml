[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redic"
version = "0.1.0"
description = "A small non-blocking TCP server that echoes length-prefixed messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "server", "echo", "framing", "non-blocking", "selectors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
redic-server = "redic.server:main"

[tool.hatch.build.targets.wheel]
packages = ["redic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
