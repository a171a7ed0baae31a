from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

setup(
    name="simplelog",
    version="0.1.0",
    description="Minimal leveled logging with shared threshold and sink",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "msgspec>=0.18",
        "pyzmq>=25",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
)
