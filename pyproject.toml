[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avatarface"
version = "0.1.0"
description = "Animated cartoon avatar faces drawn into Pillow images, with expressions, gaze, blinking and a touch-driven demo"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["avatar", "face", "animation", "graphics", "pillow"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
avatarface = "avatarface.app:main"

[tool.hatch.build.targets.wheel]
packages = ["avatarface"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
