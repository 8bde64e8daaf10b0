[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mjhelper"
version = "0.1.0"
description = "Riichi mahjong hand analysis: tile notation, shanten, waits, wall reading, deal-in risk and yaku tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["mahjong", "riichi", "shanten", "tiles", "analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mjhelper"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
