from setuptools import setup
import os

long_description = "Insper branded chart recipes for plotnine"
if os.path.exists('README.md'):
    with open('README.md') as op:
        long_description = op.read()

setup(
    name='pyinsperplot',
    version='1.0',
    packages=['pyinsperplot',],
    license='BSD',
    description = "Insper visual identity charts built on plotnine",
    long_description=long_description,
    long_description_content_type='text/markdown',
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'pandas>=1.5',
        'numpy',
        'matplotlib',
        'plotnine>=0.12',
        'mizani>=0.10',
        ],
    extras_require={
        'test': ['pytest'],
        },
    classifiers=['Development Status :: 3 - Alpha',
         'Intended Audience :: Science/Research',
         'Topic :: Scientific/Engineering',
         'Topic :: Scientific/Engineering :: Visualization',
         'Operating System :: Microsoft :: Windows',
         'Operating System :: Unix',
         'Operating System :: MacOS',
         'Programming Language :: Python',
         'Programming Language :: Python :: 3'],
)
