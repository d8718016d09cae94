[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Small worked examples of classic object-oriented design patterns: builder, abstract factory, singleton and adapter."
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "builder", "abstract factory", "singleton", "adapter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternbook-query = "patternbook.querybuilder:main"
patternbook-army = "patternbook.army:main"
patternbook-singleton = "patternbook.singleton:main"
patternbook-sensors = "patternbook.adapter:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
