[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamitools"
version = "0.1.0"
description = "Common building blocks for video codec tooling: alignment helpers, a non-copyable base class and levelled logging with FOURCC formatting."
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "codec", "alignment", "logging", "fourcc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yamitools"]

[tool.pytest.ini_options]
addopts = "-ra"
