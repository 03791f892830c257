[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "velvetbar"
version = "0.1.0"
description = "A small JSON web service for a bar's menu of drinks and foods"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["bar", "menu", "rest", "api", "flask", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
velvetbar = "velvetbar.server:main"

[tool.hatch.build.targets.wheel]
packages = ["velvetbar"]

[tool.pytest.ini_options]
addopts = "-ra"
