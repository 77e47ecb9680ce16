# ruff: noqa: D100
"""Build configuration for redux-spy."""

from setuptools import setup

setup(
    name='redux-spy',
    version='0.1.0',
    description='Spy middleware recording and awaiting actions of redux-style stores',
    python_requires='>=3.11',
    packages=['redux_spy', 'redux_spy_pytest', 'redux_spy_pytest.fixtures'],
    install_requires=[
        'python-immutable >= 1.0',
        'str-to-bool',
        'typing-extensions >= 4.9.0',
    ],
    extras_require={
        'test': [
            'pytest >= 8.1.1',
            'pytest-asyncio >= 0.23.6',
            'pytest-mock >= 3.14.0',
        ],
    },
    entry_points={
        'pytest11': ['redux_spy = redux_spy_pytest.plugin'],
    },
)
