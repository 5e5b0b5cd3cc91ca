[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dithery"
version = "0.1.0"
description = "Black-and-white image dithering with error diffusion and ordered Bayer matrices, plus a small Tk viewer"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["dither", "dithering", "floyd-steinberg", "bayer", "image", "halftone"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dithery = "dithery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dithery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
