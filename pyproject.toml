[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logengine"
version = "1.03"
description = "Dynamic arrays, sorted hashes and typed property lookup for a logging engine, plus a system version report."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "arrays", "sorted hash", "properties", "system version"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logengine-sysinfo = "logengine.system_version:main"

[tool.hatch.build.targets.wheel]
packages = ["logengine"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
