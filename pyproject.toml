[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primetools"
version = "0.1.0"
description = "Primality testing and integer factorisation: Miller-Rabin, Fermat's method and Pollard's rho"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "factorisation", "miller-rabin", "pollard-rho", "fermat", "number-theory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
primetools = "primetools.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["primetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
