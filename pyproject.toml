[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathrouter"
version = "0.7.0"
description = "Method- and glob-based request routing with URL generation for small HTTP applications."
requires-python = ">=3.10"
dependencies = []
keywords = ["web", "http", "routing", "router", "url", "wsgi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathrouter-demo = "pathrouter.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["pathrouter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
