[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numnotation"
version = "0.1.0"
description = "Building blocks for drawing hymn scores in numbered (cipher) notation as SVG"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numbered notation",
    "cipher notation",
    "jianpu",
    "svg",
    "hymn",
    "music",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Religion",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["numnotation"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
