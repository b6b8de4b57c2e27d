[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamedemos"
version = "0.1.0"
description = "Small playable pygame demos: snake, an asteroids-style shooter, keyframe animation, a sprite benchmark, minimal drawing loops and a logging demo"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["games", "demos", "pygame", "snake", "asteroids", "animation", "easing", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamedemos-snake = "gamedemos.snake:main"
gamedemos-astroblasto = "gamedemos.astroblasto:main"
gamedemos-animation = "gamedemos.animation:main"
gamedemos-bunnymark = "gamedemos.bunnymark:main"
gamedemos-simple = "gamedemos.simple:main"
gamedemos-logdemo = "gamedemos.logdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["gamedemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
