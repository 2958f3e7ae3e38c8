import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("src/dfa_validators/version.txt", "r") as f:
    version = f.read().strip()

setuptools.setup(
    name="dfa_validators",
    version=version,
    author="Ayal Klein",
    author_email="ayal.s.klein@gmail.com",
    description="data-driven deterministic finite automata for validating strings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    install_requires=[
        'structlog>=23.1',
        'pydantic>=2.0',
        'pydantic-settings>=2.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['dfa-validate=dfa_validators.cli:main'],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
