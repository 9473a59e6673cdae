[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procmon"
version = "0.1.0"
description = "A small top-like process monitor that reads process details from /proc"
requires-python = ">=3.10"
dependencies = []
keywords = ["proc", "process", "monitor", "top", "linux"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
procmon = "procmon.monitor:main"

[tool.hatch.build.targets.wheel]
packages = ["procmon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
