[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mogi"
version = "0.1.0"
description = "UI component trees with a flow layout engine, colours, vectors and render-command generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "layout", "components", "color", "vector", "render-commands"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mogi"]

[tool.pytest.ini_options]
addopts = "-ra"
