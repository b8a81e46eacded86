[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classwork"
version = "0.1.0"
description = "Introductory programming exercises and an AES-128 block cipher with conventional and T-table implementations"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "aes", "cipher", "t-table", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classwork-aes = "classwork.aes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["classwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
