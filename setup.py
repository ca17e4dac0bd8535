from setuptools import find_packages, setup


setup(
    name="proximity-point2d",
    version="1.0.0",
    description="Immutable 2D point value type with ordering, distance and editable formatting",
    long_description=open("README.md", encoding="UTF8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    license="Apache License 2.0",
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
    ],
    install_requires=[
        "pydantic~=2.11",
    ],
    extras_require={
        "linters": ["ruff~=0.11.2", "mypy~=1.15.0"],
        "dev": [
            "ruff>=0.11.2",
            "sphinx>=5.0.2",
            "sphinx-rtd-theme>=3.0.2",
            "Pygments>=2.12.0,<3.0.0",
            "pytest>=8.3.5,<9.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "proximity=proximity.cli:main",
        ],
    },
    packages=find_packages(include=["proximity", "proximity.*"])
)
