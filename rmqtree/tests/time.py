from __future__ import generator_stop

from time import sleep

from rmqtree.test import MyTestCase
from rmqtree.time import MeasureTime


class MeasureTimeTest(MyTestCase):
    def test_measure(self):
        with MeasureTime() as t:
            sleep(0.01)
        delta = t.get()
        self.assertIsInstance(delta, int)
        self.assertGreaterEqual(delta, 10_000_000)
        self.assertEqual(delta, t.get())

    def test_running(self):
        with MeasureTime() as t:
            first = t.get()
            second = t.get()
        self.assertLessEqual(first, second)
        self.assertLessEqual(second, t.get())


if __name__ == "__main__":
    import unittest

    unittest.main()
