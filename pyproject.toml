[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fintrack"
version = "0.1.0"
description = "Personal finance tracker: record income and expenses, budget limits and summaries in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "budget", "income", "expenses", "ledger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fintrack = "fintrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fintrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
