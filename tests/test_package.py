import unittest

import automata


class TestPackage(unittest.TestCase):
    def test_version(self) -> None:
        self.assertEqual(str(automata.VERSION), automata.__version__)

    def test_public_api(self) -> None:
        for name in automata.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(automata, name))


if __name__ == "__main__":
    unittest.main()
