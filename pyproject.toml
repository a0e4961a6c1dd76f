[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagerrelay"
version = "0.1.0"
description = "Check a Brightwheel message thread once and report unread messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["brightwheel", "relay", "notifications", "messages", "pager"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pager-relay = "pagerrelay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pagerrelay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
