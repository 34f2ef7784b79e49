[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spkg"
version = "3.0.0b4"
description = "A package manager that syncs repository databases, inspects specfiles and downloads source packages"
requires-python = ">=3.10"
keywords = ["package-manager", "packages", "repository", "specfile", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]
dependencies = [
    "pyyaml>=6.0",
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
spkg = "spkg.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spkg"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
