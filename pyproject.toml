[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "peopleapi"
version = "0.1.0"
description = "HTTP service for storing people, enriched with estimated age, gender and nationality"
requires-python = ">=3.10"
keywords = ["rest", "api", "flask", "sqlalchemy", "people", "enrichment", "swagger"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "flask",
    "requests",
    "sqlalchemy",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
peopleapi = "peopleapi.main:main"

[tool.hatch.build.targets.wheel]
packages = ["peopleapi"]

[tool.hatch.build.targets.sdist]
include = ["peopleapi", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
