from setuptools import setup, find_packages

setup(
    name="bulk_sql_writer",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        'click>=8.1.8',
        'polars>=1.27.1',
        'rich>=13.9.4',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'bulk-sql-writer=bulk_sql_writer.cli:main',
        ],
    },
)
