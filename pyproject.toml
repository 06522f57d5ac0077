[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsprobe"
version = "0.1.0"
description = "A small DNS client that builds queries, sends them over UDP or TCP and decodes the replies"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "client", "rfc1035", "query", "wire-format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dnsprobe = "dnsprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dnsprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
