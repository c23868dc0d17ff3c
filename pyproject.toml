[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safecat"
version = "1.0.0"
description = "Safely write standard input to a directory using the maildir delivery algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["maildir", "spool", "delivery", "mail", "atomic"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Mail Transport Agents",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
safecat = "safecat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["safecat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
