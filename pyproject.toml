[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionkit"
version = "0.0.13"
description = "Toolkit for writing GitHub Actions: inputs, workflow commands, state and action manifests"
requires-python = ">=3.10"
keywords = ["actions", "ci-cd", "github", "toolkit", "workflow-commands"]
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
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
actionkit = "actionkit.action:main"

[tool.hatch.build.targets.wheel]
packages = ["actionkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
