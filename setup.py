#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup


setup(
    name="csstatstracker",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Global hotkey engine for a manual CS round score tracker",
    long_description="Listens to system-wide keyboard events, matches configured key chords and hands score actions to the host application.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Games/Entertainment :: First Person Shooters",
    ],
    keywords=["hotkeys", "keyboard"],
    python_requires=">=3.10",
    install_requires=[
        "attrs",
        "cattrs>=22.1.0",
        "msgspec",
        "pynput>=1.7.6",
        "trio>=0.23.0",
        "trio-util>=0.7.0",
    ],
    tests_require=["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    entry_points={
        "console_scripts": [
            "csstats-hotkeys = csstatstracker.scripts:print_hotkey_actions",
            "csstats-keynames = csstatstracker.scripts:print_key_names",
        ],
    },
)
