[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edpairing"
version = "0.1.0"
description = "Pure Python arithmetic and pairings on a pairing-friendly Edwards curve and its cubic twist"
requires-python = ">=3.10"
dependencies = []
keywords = ["edwards curve", "pairing", "tate", "ate", "elliptic curve", "finite field"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edpairing"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
