[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solidauthz"
version = "0.1.0"
description = "Authentication and authorization building blocks for Solid-style resource servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["solid", "webid", "acl", "acp", "authorization", "authentication", "dpop", "permissions"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Security",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solidauthz"]

[tool.pytest.ini_options]
addopts = "-ra"
