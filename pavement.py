import os
import re

from paver.tasks import task
from paver.easy import sh


@task
def test():
    """ Run all the unit tests in a generic py.test context. """
    print("Generic Unit tests")
    sh('py.test -vs --doctest-modules tests/test_*.py pebblechain/*.py')

@task
def speed():
    """ Profile pebble generation against the full chain. """
    sh('python speedtest_chain.py')

@task
def build(quiet=True):
    """ Builds the distribution, ready to be uploaded to pypi. """
    print("Build dist")
    sh('python setup.py sdist bdist_wheel', capture=quiet)

@task
def upload(quiet=False):
    """ Uploads the latest distribution to pypi. """

    with open(os.path.join("pebblechain", "__init__.py")) as f:
        lib = f.read()
    v = re.findall("__version__.*=.*['\"](.*)['\"]", lib)[0]

    print("upload dist: %s" % v)
    sh('python setup.py sdist bdist_wheel')
    sh("twine upload dist/*%s*" % v)
