[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hooty"
version = "0.1.0"
description = "Direct computing of K2P min-max distance matrix"
requires-python = ">=3.10"
dependencies = []
keywords = ["k2p", "distance", "ambiguous", "nucleotides", "bioinformatics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hooty = "hooty.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hooty"]

[tool.pytest.ini_options]
addopts = "-ra"
