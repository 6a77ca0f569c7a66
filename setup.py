#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name="quake_log_tools",
    version="1.0.0",
    description="Python tools for Quake III Arena server log kill statistics",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[
        "requests>=2.25.0",
        "pandas>=1.0.0",
        "openpyxl>=3.0.0",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "quake-kill-report=quake_log_tools.tools.kill_report:main",
            "quake-kill-ranking=quake_log_tools.tools.kill_ranking:main",
        ],
    },
)
