[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshcook"
version = "0.1.0"
description = "Procedural polygon mesh operators, OBJ import, orbit camera and render-buffer preparation"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["mesh", "geometry", "procedural", "3d", "obj", "camera", "operators"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meshcook"]

[tool.pytest.ini_options]
addopts = "-ra"
