[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miraiclient"
version = "2.4.0"
description = "HTTP client for the mirai-api-http bot interface: sessions, message chains, contacts, group files, administration and uploads"
requires-python = ">=3.10"
keywords = ["mirai", "qq", "bot", "chat", "mirai-api-http"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["miraiclient"]

[tool.pytest.ini_options]
addopts = "-ra"
