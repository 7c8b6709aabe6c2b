[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiny3d"
version = "0.1.0"
description = "A small wireframe 3D toolkit: vectors, matrices, quaternions, lighting, a float canvas and PGM output"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "wireframe", "rendering", "pgm", "matrix", "quaternion", "bezier", "obj"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tiny3d-soccer = "tiny3d.soccer_demo:main"
tiny3d-clock = "tiny3d.clock_demo:main"
tiny3d-lighting = "tiny3d.lighting_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tiny3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
