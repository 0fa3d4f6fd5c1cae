from setuptools import setup, find_packages

setup(
    name='crocodoc',
    version='0.1.0',
    description='Client for the Crocodoc Download API',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'requests',
        'PyYAML',
        'urllib3',
        'platformdirs',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-mock',
        ],
    },
    entry_points={
        'console_scripts': [
            'crocodoc=crocodoc.cli:main',
        ],
    },
)
