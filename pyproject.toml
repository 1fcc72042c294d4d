[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "c3dkit"
version = "0.1.0"
description = "Matrices, rotations and force platform analysis for C3D motion-capture data"
requires-python = ">=3.10"
dependencies = []
keywords = ["c3d", "biomechanics", "motion capture", "force platform", "rotation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["c3dkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
