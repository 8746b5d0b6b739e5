[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnmikit"
version = "0.1.0"
description = "gNMI message types, typed-value conversion, subscription statistics and a file watcher interface in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnmi", "telemetry", "openconfig", "typed-value", "network-monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gnmikit"]

[tool.pytest.ini_options]
addopts = "-ra"
