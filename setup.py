# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='uriscope',
  version='0.0.1',
  description='uriscope is a URI/IRI text transformation engine for Python 3.',

  python_requires='>=3.10',
  packages=['uriscope', 'uriscope.bin', 'utest'],
  install_requires=['idna>=3'],
  entry_points={
    'console_scripts': [
      'uriscope = uriscope.bin.uriscope:main',
    ],
  },
)
