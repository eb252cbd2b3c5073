[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pedidos"
version = "0.1.0"
description = "Terminal order taking and kitchen queue for a small restaurant"
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "orders", "menu", "kitchen", "queue", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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

[project.scripts]
pedidos = "pedidos.interface:main"

[tool.hatch.build.targets.wheel]
packages = ["pedidos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
