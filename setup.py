from setuptools import setup, find_packages

setup(
    name="memalloc",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "memalloc.utils": ["templates/*.j2"],
    },
    entry_points={
        'console_scripts': [
            'memalloc=memalloc.cli:main',
        ],
    },
    install_requires=[
        "pyelftools>=0.29",
        "Jinja2>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.7",
    description="Memory region allocation reports for embedded ELF images",
)
