__doc_all__ = []

import unittest
import sys

from io import StringIO

from resumable.common import *
from resumable.core.util import fmt_value
from base import counted

class DebugCoroutineTest(unittest.TestCase):
    def setUp(self):
        self.err = StringIO()
        self.old_stderr, sys.stderr = sys.stderr, self.err

    def tearDown(self):
        sys.stderr = self.old_stderr

    def test_trace(self):
        producer = debug_coroutine(counted)
        co = producer(1)
        self.assertTrue(co.debug)
        self.assertEqual(co.resume('abc'), 1)
        self.assertEqual(co.resume('def'), 1)
        out = self.err.getvalue()
        self.assertTrue("Resuming <counted" in out)
        self.assertTrue("with: 'abc'" in out)
        self.assertTrue("Yields 1." in out)
        self.assertTrue("Completed, result None. Returns 1." in out)

    def test_failure(self):
        @debug_coro
        def failing(cell):
            raise RuntimeError("long_one")
            yield
        co = failing()
        self.assertRaises(RuntimeError, co.resume, 'x')
        out = self.err.getvalue()
        self.assertTrue('Exception happened during processing' in out)
        self.assertTrue('raise RuntimeError("long_one")' in out)
        self.assertTrue("Last input: 'x'" in out)

    def test_quiet_by_default(self):
        co = Coroutine(counted)
        co.resume()
        self.assertRaises(ZeroDivisionError, Coroutine(lambda cell: (
            1/0 for i in range(1))).resume)
        self.assertEqual(self.err.getvalue(), '')


class UtilTest(unittest.TestCase):
    def test_fmt_value(self):
        self.assertEqual(fmt_value('abc'), "'abc'")
        out = fmt_value('x' * 100, lim=10)
        self.assertTrue(out.startswith("'xxxxxxxxx ..."))
        self.assertTrue(out.endswith("(92 more)"))

if __name__ == "__main__":
    sys.argv.insert(1, '-v')
    unittest.main()
