[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serialtft"
version = "0.1.0"
description = "Send text drawing commands to an M5Stack LCD over a serial line, interpret them on the receiving side, and read DHT12 and BMP280 sensors"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["serial", "tft", "lcd", "m5stack", "rgb565", "dht12", "bmp280", "i2c"]
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
    "Topic :: Terminals :: Serial",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["serialtft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
