"""huecolor setup script."""

from setuptools import setup, find_packages

CONST_DESC = 'Gamut aware RGB, HSL and CIE xy conversions for smart lights'


setup(name='huecolor',
      version='0.1.0',
      description=CONST_DESC,
      long_description=open('README.rst').read(),
      license='MIT',
      install_requires=['click>=7.0', 'colorlog>=4.0'],
      extras_require={'test': ['pytest>=6.0', 'hypothesis>=6.31']},
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.8',
      entry_points={
          'console_scripts': [
              'huecolor=huecolor.__main__:cli',
          ],
      },
      zip_safe=True,
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: MIT License",
          "Operating System :: OS Independent",
          "Topic :: Home Automation"])
