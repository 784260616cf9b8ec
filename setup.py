"""
Vocalis - Model catalog bridges for speech AI providers.

This setup.py file is provided for pip install compatibility.
"""

from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="vocalis",
        version="0.1.0",
        description="Capability-tagged model catalogs for speech and voice AI providers.",
        long_description=open("README.md", encoding="utf-8").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=find_packages("src"),
        python_requires=">=3.11",
        install_requires=[
            "httpx>=0.27",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": [
                "pytest>=8.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "vocalis=vocalis.cli.main:main",
            ],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Multimedia :: Sound/Audio :: Speech",
        ],
    )
