# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="vexplorer",
    version="1.0.0",
    description="Interactive file-management shell over a virtual file system tree",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["vexplorer*"]),
    package_data={"vexplorer.interface.locales": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'vexplorer=vexplorer.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
