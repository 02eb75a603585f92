[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvlab"
version = "0.1.0"
description = "A printf-style formatter, ANSI log helpers, fixed-width integer wrapping, and ELF constants and structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["elf", "printf", "riscv", "binary", "formatting", "ansi", "relocation"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["rvlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
