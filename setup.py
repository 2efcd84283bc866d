# setup.py
from setuptools import setup, find_packages

setup(
    name="ffpid",
    version="0.1.0",
    description="PID controller with derivative on feedback, anti-windup and smoothed feedforward/boost terms",
    packages=find_packages(include=["ffpid", "ffpid.*"]),
    install_requires=[
        'numpy>=1.21.0',
        'scipy>=1.7.0',
        'matplotlib>=3.4.0'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
