from setuptools import setup, find_packages

setup(
    name="sudoku-backtrack",
    version="1.0.0",
    description="9x9 Sudoku solver using plain recursive backtracking",
    author="robomotic",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-backtrack=sudoku_backtrack.cli:main",
        ],
    },
)
