[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splkit"
version = "0.1.0"
description = "Bit-exact fixed-point signal processing primitives: saturating arithmetic, division, square root, vector scaling, FFT and resampling."
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "fixed-point", "audio", "resampling", "fft", "signal processing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["splkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
