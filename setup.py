from setuptools import setup, find_packages

setup(
    name='pairtree',
    version='0.1.0',
    author='Konstantinos Kogkalidis',
    description='Level-paired perfect binary trees with lifted and ordered search.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ]
    },
    python_requires='>=3.11',
    entry_points={
        'console_scripts': [
            'pairtree=pairtree.api.cli:main'
        ]
    }
)
