[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volehash"
version = "0.1.0"
description = "Universal hashing over binary extension fields GF(2^n) for VOLE-based zero-knowledge proofs"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "universal hashing", "binary field", "GF(2^n)", "VOLE", "zero-knowledge"]
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
packages = ["volehash"]

[tool.pytest.ini_options]
addopts = "-ra"
