[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketautomat"
version = "0.1.0"
description = "Building blocks of a console tram ticket machine: cash box, payment and change prompts, tickets and logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["ticket", "vending machine", "tram", "cash box", "change", "point of sale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ticketautomat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
