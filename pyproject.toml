[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genart"
version = "0.1.0"
description = "Small generative-art algorithms: curve smoothing, line clipping and hatching, Poisson-disk sampling, circle packing, watercolour polygons and small simulations."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "generative-art",
    "geometry",
    "chaikin",
    "poisson-disk",
    "circle-packing",
    "line-clipping",
    "tic-tac-toe",
]
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
    "Topic :: Artistic Software",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
genart-neutrons = "genart.neutrons:main"

[tool.hatch.build.targets.wheel]
packages = ["genart"]

[tool.pytest.ini_options]
addopts = "-ra"
