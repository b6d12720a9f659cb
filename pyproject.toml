[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtoolkit"
version = "0.1.0"
description = "Everyday helpers: strings, versions, phone numbers, padding, base62, AES, signing, time windows, timers, sync primitives and file utilities"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["toolkit", "utilities", "aes", "signing", "base62", "padding", "semaphore", "timer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xtoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
