[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cprkit"
version = "0.1.0"
description = "Building blocks for an HTTP client: header parsing, URL encoding, timeouts, SSL verification flags, error codes and responses"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "headers", "url-encoding", "timeout"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cprkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
