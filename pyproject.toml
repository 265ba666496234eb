[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "0.1.0"
description = "Worked exercises in numbers, data structures and design patterns, each as a small tested module"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "education",
    "rational",
    "big-integer",
    "quicksort",
    "linked-list",
    "gcd",
    "design-patterns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbook-quadratic = "drillbook.quadratic:main"
drillbook-charclass = "drillbook.charclass:main"
drillbook-stats = "drillbook.stats:main"
drillbook-collatz = "drillbook.collatz:main"
drillbook-shapes = "drillbook.shapes:main"
drillbook-ipv4 = "drillbook.ipv4:main"
drillbook-game = "drillbook.game:main"
drillbook-weasel = "drillbook.weasel:main"
drillbook-timer = "drillbook.timer:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

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
