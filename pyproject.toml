[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socialgraph"
version = "0.1.0"
description = "A small social network of users and friendships, with path finding, friend suggestions and group detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["social network", "graph", "bfs", "friends", "connected components"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Sociology",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
socialgraph = "socialgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["socialgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
