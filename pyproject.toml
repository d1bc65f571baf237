[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradekit"
version = "0.1.0"
description = "Point-based assertions, scored test cases, leaderboards and timing helpers for grading, plus a small vector and a palindrome detector."
requires-python = ">=3.10"
dependencies = []
keywords = ["grading", "autograder", "assertions", "scoring", "leaderboard", "palindrome"]
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
    "Topic :: Software Development :: Testing :: Unit",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gradekit-palindrome = "gradekit.palindrome:main"

[tool.hatch.build.targets.wheel]
packages = ["gradekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
