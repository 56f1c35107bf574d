from glob import glob
from setuptools import setup


setup(
    name='pascaline',
    version='0.1.0',
    description='RPN calculator engine',
    python_requires='>=3.6',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['pascaline'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
