[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tapenbt"
version = "0.6.1"
description = "Read and write Minecraft's binary NBT format in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["nbt", "minecraft", "mutf-8", "binary", "serialization", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
tapenbt = "tapenbt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tapenbt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
