[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginecore"
version = "0.1.0"
description = "Core runtime pieces of a small game engine: interned names, object reflection, delegates, show flags, a debug console, a font atlas reader, debug line batching and JSON scene files."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "reflection", "delegates", "debug-console", "scene", "font-atlas"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginecore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
