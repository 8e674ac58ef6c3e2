[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pxmfilters"
version = "0.1.0"
description = "PGM/PPM image reading and writing with gamma, Gaussian, bilateral and non-local means filters"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "image-processing",
    "pgm",
    "ppm",
    "netpbm",
    "gamma-correction",
    "gaussian-filter",
    "bilateral-filter",
    "non-local-means",
    "psnr",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pxmfilters = "pxmfilters.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pxmfilters"]

[tool.pytest.ini_options]
addopts = "-ra"
