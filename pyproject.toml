[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vpdscan"
version = "3.1"
description = "Find and decode IBM Vital Product Data records in the BIOS memory area"
requires-python = ">=3.10"
dependencies = []
keywords = ["vpd", "bios", "thinkpad", "hardware", "firmware", "ibm"]
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
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vpdscan = "vpdscan.decoder:main"

[tool.hatch.build.targets.wheel]
packages = ["vpdscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
