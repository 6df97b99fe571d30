from setuptools import setup, find_packages

setup(
    name='modval',
    version='0.1-dev',
    author='modval contributors',
    description='In-place modification accessors for boxes, mappings and '
                'sequences.',
    python_requires='>=3.7',
    install_requires=['funcy'],
    extras_require={
        'test': ['pytest'],
    },
    packages=find_packages(include=['modval*']),
)
