from setuptools import setup


setup(
    name='mathcalc',
    version='1.0.0',
    description='Multi-stack calculator',
    install_requires=[
        'regex',
    ],
    packages=['mathcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
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
    license='ISC',
)
