[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrforge"
version = "0.1.0"
description = "Module canvas, functional patterns, masking and penalty scoring for QR, Micro QR and rMQR symbols"
requires-python = ">=3.10"
dependencies = []
keywords = ["qrcode", "micro-qr", "rmqr", "barcode", "masking"]
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
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qrforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
