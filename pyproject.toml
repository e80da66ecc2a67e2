[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leaftree"
version = "0.1.0"
description = "Thread-safe segment tree for acquiring and releasing slots from a fixed-size pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["segment tree", "slot allocation", "concurrency", "pool"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leaftree-demo = "leaftree.signal_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["leaftree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
