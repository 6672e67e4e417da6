[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lottoschein"
version = "1.0.0"
description = "Console lottery ticket generators for Lotto 6 aus 49 and Eurolotto, with number pools, frequency tables and saved picks"
requires-python = ">=3.10"
dependencies = []
keywords = ["lotto", "lottery", "eurolotto", "6 aus 49", "ticket", "random"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lottoschein = "lottoschein.manager:main"
lottoschein-quicktip = "lottoschein.quicktip:main"
lottoschein-guess = "lottoschein.guessing:main"
lottoschein-program = "lottoschein.program:main"
lottoschein-board = "lottoschein.board:main"
lottoschein-sets = "lottoschein.setbased:main"
lottoschein-pool = "lottoschein.pool:main"

[tool.hatch.build.targets.wheel]
packages = ["lottoschein"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
