from setuptools import setup, find_packages

setup(
    name="rlp-import",
    version="1.0.0",
    description="Streaming decoder for files of concatenated RLP-encoded blocks",
    author="rlp-import Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-snappy>=0.7.3",
        "pandas>=2.0.3",
        "pyarrow>=12.0.1",
        "requests>=2.31.0",
    ],
    entry_points={
        "console_scripts": [
            "rlp-import=rlp_import.cli:main",
        ],
    },
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.4.0", "pydantic>=2.0", "deepdiff>=6.3.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Archiving",
    ],
)
