[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small console tools: a Huffman coder, a line editor with a paged active area, and an employee registry"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "line-editor", "employee", "registry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-huffman = "coursekit.huffman:main"
coursekit-editor = "coursekit.editor:main"
coursekit-employees = "coursekit.employees:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
