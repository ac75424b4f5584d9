[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ahrsfusion"
version = "1.0.0"
description = "Sensor fusion for inertial measurement units: AHRS orientation, tilt-compensated compass, gyroscope offset correction and calibration models"
requires-python = ">=3.10"
dependencies = []
keywords = ["ahrs", "imu", "sensor fusion", "quaternion", "gyroscope", "accelerometer", "magnetometer", "compass"]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ahrsfusion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
