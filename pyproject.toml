[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gsm"
version = "0.1.0"
description = "GitHub Secrets Manager: encrypt YAML secret configs and push them to GitHub repositories"
requires-python = ">=3.10"
keywords = ["github", "secrets", "encryption", "aes-gcm", "cli", "yaml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
    "pynacl",
    "pyyaml",
    "httpx",
    "python-dotenv",
    "termcolor",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gsm = "gsm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gsm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
