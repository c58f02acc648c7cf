[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udxkit"
version = "0.1.0"
description = "Building blocks for a reliable, multiplexed stream transport over UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "transport", "networking", "mtu", "circular-buffer", "queue"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["udxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
