[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbrng"
version = "0.1.0"
description = "Counter-based random number generators in pure Python: Philox, ARS, a stream adapter and a seeded sequential wrapper"
requires-python = ">=3.10"
dependencies = []
keywords = ["random", "rng", "counter-based", "philox", "ars", "monte-carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cbrng-pi = "cbrng.pi:main"

[tool.hatch.build.targets.wheel]
packages = ["cbrng"]

[tool.pytest.ini_options]
addopts = "-ra"
