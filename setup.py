from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e ".[test]"'
"""

INSTALL_REQUIRES = [
    "numpy>=1.26",
    "msgspec>=0.18",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=8.0",
    ],
}


setup(
    name="perf_lite",
    version="0.1.0",
    description="Lightweight micro-benchmarking harness.",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "perf-lite=perf_lite.cli:main",
        ],
    },
)
