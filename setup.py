from setuptools import find_packages, setup

setup(
    name="hippoo",
    version="0.1.0",
    description="Check and compare the download footprint of npm packages.",
    python_requires=">=3.10",
    packages=find_packages(include=["hippoo", "hippoo.*"]),
    install_requires=[
        "click>=8.1",
        "requests>=2.31",
        "result>=0.17",
        "rich>=13.7",
        "tenacity>=8.2",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "hippoo=hippoo.cli:main",
        ],
    },
)
