[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zoomcsv"
version = "0.1.0"
description = "Streaming CSV reader and a tool that groups a Zoom participant report by e-mail"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "zoom", "participants", "parser", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zoomcsv = "zoomcsv.participants:main"

[tool.hatch.build.targets.wheel]
packages = ["zoomcsv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
