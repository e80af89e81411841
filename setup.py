from setuptools import setup, find_namespace_packages

setup(
    name='docker-repository-cdk',
    version='0.1.0',
    package_dir={'': 'infrastructure'},
    packages=find_namespace_packages(where='infrastructure', include=['stacks', 'stacks.*']),
    install_requires=[
        'aws-cdk-lib>=2.100.0,<3.0.0',
        'constructs>=10.0.0,<11.0.0',
        'python-dotenv==1.0.0',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
