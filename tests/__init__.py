import glob
import os
import sys
import unittest

from unittest import TestCase

suites = []
add = suites.append

for name in glob.glob(os.path.join(os.path.dirname(__file__), "test_*.py")):
    module = "tests." + os.path.basename(name)[:-3]
    __import__(module, {}, {}, [])


def unit(run=None):
    """Run the registered test cases.

    run is a list of TestCase names; an empty list runs all of them.
    Returns the number of tests run and the number of failures.
    """

    suite = unittest.TestSuite()
    loader = unittest.TestLoader()
    for case in suites:
        if not run or case.__name__ in run:
            suite.addTest(loader.loadTestsFromTestCase(case))
    result = unittest.TextTestRunner(stream=sys.stdout, verbosity=1).run(suite)
    return result.testsRun, len(result.failures) + len(result.errors)


__all__ = ["TestCase", "add", "unit"]
