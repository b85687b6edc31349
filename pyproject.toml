[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmtser"
version = "0.1.0"
description = "Serialize PMT values and PDUs of complex samples to their binary wire format"
requires-python = ">=3.10"
dependencies = []
keywords = ["pmt", "pdu", "sdr", "serialization", "iq", "samples"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pmtser = "pmtser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pmtser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
