[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jmart"
version = "0.1.0"
description = "Game logic and geometry for a supermarket simulation: items, inventory, meshes, OBJ/TGA loading and cameras"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "mesh", "obj", "tga", "camera", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jmart"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
