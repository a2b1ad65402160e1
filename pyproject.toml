[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kantin"
version = "0.1.0"
description = "Canteen ordering: stock-tracked menu, customer queue, order history and a pay-at-counter cart"
requires-python = ">=3.10"
dependencies = []
keywords = ["canteen", "queue", "menu", "stock", "point-of-sale", "cart"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
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
kantin = "kantin.app:main"
kantin-cart = "kantin.cart:main"

[tool.hatch.build.targets.wheel]
packages = ["kantin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
