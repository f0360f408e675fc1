import sys
from configparser import ConfigParser
import setuptools

# Package Requirements
BASE_DEPENDENCIES = [
    'numpy',
    'scipy',
    'numba>=0.50',
    'pyyaml',
]

EXTRA_DEPENDENCIES = {
    'test': ['pytest'],
}

# Get some values from the setup.cfg
conf = ConfigParser()
conf.read(['setup.cfg'])
metadata = dict(conf.items('metadata'))

PACKAGENAME = metadata.get('package_name')
DESCRIPTION = metadata.get('description')
DESCRIPTION_FILE = metadata.get('description-file')
VERSION = metadata.get('version')
AUTHOR = metadata.get('author')
AUTHOR_EMAIL = metadata.get('author_email')
LICENSE = metadata.get('license')
URL = metadata.get('url')
__minimum_python_version__ = metadata.get("minimum_python_version")

# Enforce Python version check - this is the same check as in __init__.py
if sys.version_info < tuple((int(val) for val in __minimum_python_version__.split('.'))):
    sys.stderr.write("ERROR: packagename requires Python {} or later\n".format(__minimum_python_version__))
    sys.exit(1)

# Read the README file into a string
with open(DESCRIPTION_FILE, "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name=PACKAGENAME,
    version=VERSION,
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type="text/markdown",
    url=URL,
    license=LICENSE,
    packages=setuptools.find_packages(include=['electrosplit', 'electrosplit.*']),
    install_requires=BASE_DEPENDENCIES,
    extras_require=EXTRA_DEPENDENCIES,
    classifiers=[
        # Chose either "3 - Alpha", "4 - Beta" or "5 - Production/Stable" as the current state of your package
        'Development Status :: 3 - Alpha',
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>={}'.format(__minimum_python_version__),
)
