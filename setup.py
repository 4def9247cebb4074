from setuptools import setup, find_packages

setup(
    name="minesweeper_images",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "frontend": ["static/images/*.svg"],
    },
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    },
    entry_points={
        "console_scripts": [
            "minesweeper-server=frontend.app:main",
            "minesweeper-table=frontend.table:main"
        ]
    },
)
