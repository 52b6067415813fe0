[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repovis"
version = "0.56.0"
description = "Layout and animation state for visualising version control history: file-type key, timeline slider, text boxes, pawns, spline edges and log loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["version control", "visualisation", "git", "history", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repovis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
