# ruff: noqa: D100
from setuptools import setup

setup(
    name='python-statebox',
    version='0.1.0',
    description='Single-writer state container with reducers and middlewares',
    python_requires='>=3.11',
    packages=['statebox', 'statebox_pytest', 'statebox_pytest.fixtures'],
    install_requires=[
        'python-immutable>=1.1.1,<1.2',
        'str-to-bool>=0.1.1',
        'typing-extensions>=4.9.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.1.1',
            'pytest-benchmark>=4.0.0',
            'pytest-mock>=3.14.0',
        ],
    },
    entry_points={
        'pytest11': ['statebox = statebox_pytest.plugin'],
    },
)
