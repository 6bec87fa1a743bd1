[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexusprover"
version = "0.9.7"
description = "Prover node helpers: task caching, system measurements, release checks, dashboard text and a Fibonacci guest program."
requires-python = ">=3.10"
dependencies = [
    "psutil",
    "semver",
]
keywords = ["prover", "zkvm", "distributed computing", "fibonacci", "version check"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
nexusprover-fib = "nexusprover.fib:main"

[tool.hatch.build.targets.wheel]
packages = ["nexusprover"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
