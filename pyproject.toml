[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ginlet"
version = "0.1.0"
description = "Building blocks for an HTTP framework: typed request errors, a per-request key store, in-memory request/response objects, trusted-proxy client IP helpers and a file system view."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "web", "errors", "proxy", "client-ip", "x-forwarded-for"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ginlet"]

[tool.pytest.ini_options]
addopts = "-ra"
