[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fintrack"
version = "0.1.0"
description = "Track income and expense transactions, summarise balances and export to CSV."
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "budget", "transactions", "income", "expenses", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["fintrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
