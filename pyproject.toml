[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rendray"
version = "0.1.0"
description = "A small path tracer that renders spheres and cylinders to a plain-text PPM image"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "renderer", "ppm", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rendray = "rendray.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rendray"]

[tool.pytest.ini_options]
addopts = "-ra"
