from setuptools import setup, find_packages

with open("README.md") as f:
    readme = f.read()

setup(
    name="lofrank",
    version="0.1.0",
    description=("lofrank ranks the points of numeric datasets by their "
                 "local outlier factor (LOF)"),
    long_description=readme,
    long_description_content_type="text/markdown",
    license='GPL-3.0',
    classifiers=['Topic :: Scientific/Engineering :: Information Analysis',
                 'Intended Audience :: Science/Research',
                 'Operating System :: OS Independent',
                 'Programming Language :: Python :: 3'],
    keywords='LOF outlier anomaly',
    packages=find_packages(exclude=["*tests*", "*examples*"]),
    python_requires='>=3.7',
    install_requires=[
        'numpy',
        'matplotlib',
        'openpyxl',
        'pandas',
        'scipy',
        'tqdm',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['lofrank=lofrank.cli:main'],
    },
)
