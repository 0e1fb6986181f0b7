from setuptools import setup, find_packages


def load_requirements(filename='requirements.txt'):
    with open(filename, 'r') as file:
        return file.read().splitlines()


setup(
    name='fastfib',
    version='0.1.0',
    author='Luke Li',
    author_email='zhongwei.li@mavs.uta.edu',
    description='Fibonacci numbers modulo m in O(log n) by 2x2 matrix exponentiation, for 64-bit and '
                'arbitrary-precision integers.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/r5by/fastfib',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=load_requirements(),
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    python_requires='>=3.8',
)
