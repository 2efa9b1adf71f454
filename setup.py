from glob import glob
from setuptools import setup


setup(
    name='astcalc',
    version='0.1.0',
    description='Calculator that parses expressions into ASTs, and draws them',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['astcalc'],
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
            'bandit',
            'mypy',
            'safety',
        ],
    },
    tests_require=[
        'pytest',
        'pytest-cov',
        'coverage',
        'flake8',
        'bandit',
        'mypy',
        'safety',
    ],
    scripts=glob('bin/*'),
    license='ISC',
)
