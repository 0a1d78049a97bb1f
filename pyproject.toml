[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radixconv"
version = "0.1.0"
description = "Radix-2 fast Hartley transforms and spectral convolution helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hartley", "fft", "convolution", "cross-correlation", "spectrum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
radixconv-check = "radixconv.check:main"

[tool.hatch.build.targets.wheel]
packages = ["radixconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
