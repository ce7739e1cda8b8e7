import json
from setuptools import setup, find_packages

# Load configuration from JSON file
with open('candicolor/config.json', 'r') as config_file:
    config = json.load(config_file)

setup(
    name="candicolor",
    version=config['version'],
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=2.0.1",
        "pandas>=2.2.2",
        "matplotlib>=3.9.1.post1",
        "seaborn>=0.13.2",
    ],
    entry_points={
        "console_scripts": [
            "candicolor=candicolor.cli:main",
        ],
    },
    description="candicolor: Assign distinct hues to candidates that co-occur on a timeline",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
        "test": [
            "pytest",
        ],
    },
    package_data={"candicolor": ["config.json"]},
    include_package_data=True,
)
