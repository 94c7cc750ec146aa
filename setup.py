#!/usr/bin/env python3
from setuptools import setup
import re
import datetime

# Update build time in termnovel.py
def update_build_time():
    build_time = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    with open("termnovel.py", "r") as f:
        content = f.read()

    pattern = r'__build_time__ = "[^"]*"'
    replacement = f'__build_time__ = "{build_time}"'
    new_content = re.sub(pattern, replacement, content)

    with open("termnovel.py", "w") as f:
        f.write(new_content)

    print(f"Updated build time to: {build_time}")

update_build_time()

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="termnovel",
    version="0.3.0",
    author="Lee Hanken",
    author_email="",
    description="Search, pick and read web novel chapters in the terminal",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/macsplit/termnovel",
    py_modules=["termnovel"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console :: Curses",
        "Topic :: Games/Entertainment",
        "Topic :: Utilities",
        "Development Status :: 4 - Beta",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25.0",
        "beautifulsoup4>=4.9.0",
        "pyfiglet>=0.8",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pexpect>=4.8",
        ],
    },
    entry_points={
        "console_scripts": [
            "termnovel=termnovel:main",
        ],
    },
)
