[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iosched"
version = "0.1.0"
description = "Thread-safe socket handles and scatter/gather message headers for POSIX sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "networking", "sendmsg", "recvmsg", "file descriptor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iosched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
