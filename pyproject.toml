[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pekoms"
version = "0.1.0"
description = "Small parser combinators: sequences, alternatives, branches, repetition and optional parts"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "combinator", "parsing", "binary", "text"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pekoms-json = "pekoms.json_parser:main"
pekoms-sexpr = "pekoms.sexpr:main"
pekoms-wav = "pekoms.wav:main"

[tool.hatch.build.targets.wheel]
packages = ["pekoms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
