[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptopals"
version = "0.1.0"
description = "Hex and base64 conversion, XOR cipher breaking, GF(2^8) arithmetic, AES-128 ECB decryption and ECB detection"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "cryptanalysis",
    "xor",
    "aes",
    "ecb",
    "base64",
    "hex",
    "galois-field",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptopals = "cryptopals.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptopals"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
