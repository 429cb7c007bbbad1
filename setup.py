import setuptools

setuptools.setup(
    name='jlbind',
    version='0.1',
    license='BSD-3-Clause',
    zip_safe=False,
    package_dir={'': 'toolchain'},
    packages=setuptools.find_packages(where='toolchain'),
    python_requires='>=3.8',
    install_requires=[
        'pyyaml', 'rich', 'rapidfuzz'
    ],
    extras_require={
        'test': ['pytest'],
    },
    description='Generator for the Julia code that passes program input parameters to a native parameter store.',
)
