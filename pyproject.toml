[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vgatext"
version = "0.1.0"
description = "A simulated 80x25 VGA text-mode screen with textboxes and a printk-style formatter"
requires-python = ">=3.10"
dependencies = []
keywords = ["vga", "text-mode", "console", "printk", "emulation"]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vgatext-demo = "vgatext.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["vgatext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
