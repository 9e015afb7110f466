[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdccutil"
version = "0.1.0"
description = "Support routines for an IRC/XDCC client: pure-Python MD5, argument splitting, integer formatting, CRLF framing and CTCP replies"
requires-python = ">=3.10"
dependencies = []
keywords = ["irc", "xdcc", "md5", "ctcp", "argument-splitting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xdccutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
