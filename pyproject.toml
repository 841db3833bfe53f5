[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "litemime"
version = "0.2.0"
description = "Lightweight MIME helpers: quoted-printable coding, RFC 2047 encoded words and content type detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["mime", "email", "quoted-printable", "rfc2047", "encoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["litemime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
