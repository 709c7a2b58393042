import setuptools

with open('README.md', 'rt') as f:
    long_description = f.read()

setuptools.setup(
    name='hdlbits',
    version='0.1.0',
    description='two-state bit vectors with hardware register semantics, backed by GMP',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    python_requires='>=3.7',
    install_requires=['numpy>=1.23.0', 'gmpy2>=2.1.2'],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    packages=['hdlbits', 'hdlbits.core', 'hdlbits.vector', 'hdlbits.tools'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
    ],
)
