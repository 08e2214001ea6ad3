[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "secpcurve"
version = "0.1.0"
description = "Field arithmetic and point operations on the secp256k1 elliptic curve"
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "elliptic curve", "finite field", "bitcoin", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
secpcurve = "secpcurve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["secpcurve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
