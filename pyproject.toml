[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inetdiag"
version = "0.1.0"
description = "Decoders for Linux sock_diag / inet_diag netlink messages and their attributes"
requires-python = ">=3.10"
dependencies = []
keywords = ["netlink", "sock_diag", "inet_diag", "tcp", "socket", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inetdiag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
