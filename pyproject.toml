[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goolzip"
version = "0.1.0"
description = "Huffman archiver for single files and whole folder trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "archiver", "entropy-coding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goolzip = "goolzip.cli:main"
goolzip-selftest = "goolzip.selftest:main"

[tool.hatch.build.targets.wheel]
packages = ["goolzip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
