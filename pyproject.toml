[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chdriver"
version = "0.1.0"
description = "Client-side building blocks for a columnar database driver: query settings, word matching, result sets and value types"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "driver", "columnar", "query-settings", "varint", "uuid"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chdriver"]

[tool.pytest.ini_options]
addopts = "-ra"
