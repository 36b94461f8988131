from setuptools import setup, find_packages
setup(
  name = 'hexlog',
  packages = find_packages(exclude=['tests', 'tests.*']),
  version = '0.1',
  license='MIT',
  description = 'Console logger with per-level hex color themes and line templates',
  keywords = ['logging', 'console', 'ansi', 'color'],
  python_requires='>=3.9',
  install_requires=[
          'loguru>=0.6.0',
          'rich>=12.0.0',
          'arrow>=1.2.0',
      ],
  extras_require={
          'test': ['pytest>=7.0'],
      },
  classifiers=[
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'Topic :: System :: Logging',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.9',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
  ],
)
