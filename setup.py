from setuptools import find_packages, setup


setup(
    name="seqsig",
    version="0.3.0",
    description=(
        "Geometric signatures and local pattern histograms "
        "of biological sequences"
    ),
    author="The Seqsig contributors",
    license="BSD-3-Clause",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "seqsig": ["py.typed"],
        "seqsig.signature": ["*.pyi"],
    },
    install_requires=[
        "numpy >= 1.25",
        "requests >= 2.12",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-codspeed",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
)
