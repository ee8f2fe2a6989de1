[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "falconast"
version = "0.1.0"
description = "Syntax tree for a small text language that prints back as source and renders to Blockly block XML"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockly", "ast", "syntax tree", "code generation", "xml"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["falconast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
