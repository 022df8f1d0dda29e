[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipmeter"
version = "0.1.0"
description = "An in-memory JSON item tree with comparison, copying and string escaping, plus DSCP/TOS name lookups"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "tree", "escape", "dscp", "tos", "qos"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ipmeter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
