[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opsyskit"
version = "0.1.0"
description = "Linked-list containers, a hash set, a mutable string and small process-scheduling tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "queue", "stack", "priority queue", "hash set", "scheduler", "round robin"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
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
opsyskit-cpubound = "opsyskit.workloads:cpubound_main"
opsyskit-iobound = "opsyskit.workloads:iobound_main"
opsyskit-uspsv1 = "opsyskit.usps_launch:main_v1"
opsyskit-uspsv2 = "opsyskit.usps_launch:main_v2"
opsyskit-uspsv3 = "opsyskit.usps_sched:main_v3"
opsyskit-uspsv4 = "opsyskit.usps_sched:main_v4"

[tool.hatch.build.targets.wheel]
packages = ["opsyskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
