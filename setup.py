from setuptools import setup, find_packages
import ppld


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='ppld',
    description="A linker driver implemented in pure Python",
    long_description=long_description,
    version=ppld.__version__,
    author='Windel Bouwman',
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    package_data={'': ["*.rst"]},
    python_requires='>=3.7',
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ppld = ppld.cli.link:link',
            'ppld-ld = ppld.cli.link:link',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Build Tools',
        'Topic :: Software Development :: Compilers',
    ]
)
