[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshview"
version = "0.1.0"
description = "A small wireframe viewer that loads Wavefront OBJ meshes and spins them in an OpenGL window"
requires-python = ">=3.10"
keywords = ["obj", "wavefront", "mesh", "opengl", "wireframe", "viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meshview = "meshview.application:main"

[tool.hatch.build.targets.wheel]
packages = ["meshview"]

[tool.pytest.ini_options]
addopts = "-ra"
