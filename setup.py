from setuptools import setup
from setuptools import find_packages

setup(
    name='ecsdeploy',
    version='0.1.0',
    packages=find_packages(include=['ecsdeploy', 'ecsdeploy.*']),
    install_requires=[
        'Click',
        'PyYAML',
        'boto3',
        'botocore',
        'pick'
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'ecsdeploy = ecsdeploy.ecsdeploy:deploy',
        ],
    },
)
