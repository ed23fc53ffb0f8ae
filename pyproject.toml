[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subfinder_types"
version = "0.1.0"
description = "Data types for a subtitle finder: languages, Emby media records, series and subtitle information"
requires-python = ">=3.10"
dependencies = []
keywords = ["subtitles", "emby", "chinese", "media", "video"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["subfinder_types"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
