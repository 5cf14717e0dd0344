[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subasta"
version = "0.1.0"
description = "A small interactive auction manager with lots, bidders and highest-offer tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["auction", "bidding", "lots", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subasta = "subasta.cli:main"
subasta-peliculas = "subasta.movies:main"
subasta-grabacion = "subasta.recording:main"
subasta-hola = "subasta.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["subasta"]

[tool.pytest.ini_options]
addopts = "-ra"
