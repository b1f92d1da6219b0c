[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "srla"
version = "0.1.0"
description = "Building blocks for the SRLA lossless audio format: stream header records, byte packing and PCM WAV file I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "lossless", "codec", "wav", "pcm", "riff"]
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
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["srla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
