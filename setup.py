# setup.py
from setuptools import setup, find_packages

setup(
    name='DynParamUtils',
    version='1.0',
    packages=find_packages(include=['DynParamUtils', 'DynParamUtils.*']),
    package_data={
        'DynParamUtils': ['i18n/*.yaml', 'templates/parameter/*.j2'],
    },
    install_requires=[
        'pydantic>=2.0',
        'jinja2>=3.1',
        'pyyaml>=6.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'dynparam = DynParamUtils.cli.main:main',
        ],
    },
    python_requires='>=3.9',
)
