[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moc"
version = "0.1.0"
description = "Models of computation: deterministic, nondeterministic and pushdown automata with JFLAP file support"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "dfa", "nfa", "pda", "jflap", "formal-languages"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moc = "moc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["moc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
