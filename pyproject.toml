[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-system lab simulations: CPU scheduling, paging, memory allocation, disk scheduling, deadlock avoidance and a small batch machine."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "paging",
    "page replacement",
    "memory allocation",
    "disk scheduling",
    "bankers algorithm",
    "simulation",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab = "oslab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
