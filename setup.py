from setuptools import setup, find_packages

setup(
    name="sudoku-csp",
    version="1.0.0",
    description="Sudoku solver using backtracking over a position/group constraint graph",
    packages=find_packages(include=["sudoku_csp", "sudoku_csp.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "seaborn>=0.11.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-csp=sudoku_csp.cli:main",
        ],
    },
)
