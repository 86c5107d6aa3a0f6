[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webserv"
version = "0.1.0"
description = "An nginx-style configuration parser and listening socket for a small web server"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "configuration", "parser", "nginx", "socket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
webserv = "webserv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["webserv"]

[tool.pytest.ini_options]
addopts = "-ra"
