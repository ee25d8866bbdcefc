from setuptools import setup, find_packages

setup(
    name="symtree",
    version="0.1.0",
    packages=find_packages(include=["symtree", "symtree.*"]),
    install_requires=[
        "networkx>=2.6",
        "z3-solver>=4.8.12",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'symtree=symtree.cli:main',
        ],
    },
    description="Materializes symbolic execution trees as DOT graphs",
    keywords="symbolic execution, path condition, execution tree, graphviz",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
