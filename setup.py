import os
import re

from setuptools import setup


base_dir = os.path.dirname(__file__)
with open(os.path.join(base_dir, "boundedio", "__init__.py")) as f:
    version = re.search(r"^__version__ = '([^']+)'", f.read(), re.MULTILINE).group(1)

try:
    long_description = open("README.rst", "r").read()
except Exception:
    long_description = None


setup(
    name='boundedio',
    version=version,
    packages=['boundedio'],
    license='MIT',
    description='Expose a fixed region of a seekable stream as a stream of its own',
    long_description=long_description,
    keywords=['stream', 'io', 'substream', 'bytes'],
    python_requires='>=3.5',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
