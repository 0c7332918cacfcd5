[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randomface"
version = "0.1.0"
description = "Generate a cartoon face from a name by layering RGBA PNG parts"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["png", "avatar", "face", "generator", "image", "overlay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
randomface = "randomface.face:main"

[tool.hatch.build.targets.wheel]
packages = ["randomface"]

[tool.pytest.ini_options]
addopts = "-ra"
