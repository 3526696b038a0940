[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smwkit"
version = "0.1.0"
description = "Tools for Super Mario World ROM data: decompression, tiles, colours, palettes and 65816 instruction decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["snes", "65816", "disassembler", "rom", "lz2", "rle", "palette", "graphics"]
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
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
