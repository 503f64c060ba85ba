[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraydrills"
version = "0.1.0"
description = "Small array, number and text-pattern drills: searching, majority elements, Kadane's algorithm, base conversion and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["arrays", "algorithms", "kadane", "majority-element", "patterns", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arraydrills = "arraydrills.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["arraydrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
