[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "setfield"
version = "0.1.0"
description = "Bit fields, bounded integer sets built on them, a prime sieve, and small dynamic vectors and square matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitfield", "bitset", "set", "sieve", "primes", "matrix", "vector"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
setfield-sieve = "setfield.sieve:main"
setfield-matrix-demo = "setfield.matrix_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["setfield"]

[tool.pytest.ini_options]
addopts = "-ra"
