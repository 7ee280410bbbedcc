[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palindrome-policy"
version = "0.1.0"
description = "Admission policy that rejects pods whose label keys are palindromes"
requires-python = ">=3.10"
dependencies = []
keywords = ["admission", "policy", "kubernetes", "palindrome", "labels"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
palindrome-policy = "palindrome_policy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["palindrome_policy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
