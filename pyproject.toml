[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractscope"
version = "1.0.0"
description = "Interactive Mandelbrot, Julia and Burning Ship fractal viewer with a small toolkit of text and buffer helpers"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "burning-ship", "viewer", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractscope = "fractscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractscope"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
