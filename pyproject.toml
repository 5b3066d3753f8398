[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinkal"
version = "0.1.0"
description = "Kinematic Kalman fit building blocks: time ranges, fit parameters, particle states and magnetic field maps"
requires-python = ">=3.10"
keywords = ["kalman", "track fitting", "magnetic field", "particle physics", "kinematics", "units"]
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
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kinkal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
