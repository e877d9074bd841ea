from setuptools import find_packages, setup

setup(
    name='efipath',
    version='0.1.0',
    description='Decoder for UEFI messaging device path nodes',
    author='isantolin',
    author_email='',
    packages=find_packages(include=['efipath', 'efipath.*']),
    python_requires='>=3.11',
    install_requires=[
        'construct',
        'msgspec',
        'marshmallow',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
