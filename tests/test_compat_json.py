import unittest

from automata.compat import json


class TestJson(unittest.TestCase):
    def test_dumps_sorts_keys_on_request(self) -> None:
        self.assertEqual(json.dumps({"b": 1, "a": None}, sort_keys=True).replace(" ", ""), '{"a":null,"b":1}')

    def test_loads_accepts_text_and_bytes(self) -> None:
        payload = '{"loadType": "empty", "data": {}}'

        self.assertEqual(json.loads(payload), {"loadType": "empty", "data": {}})
        self.assertEqual(json.loads(payload.encode()), {"loadType": "empty", "data": {}})

    def test_invalid_documents_raise_value_error(self) -> None:
        with self.assertRaises(ValueError):
            json.loads("{not json")

    def test_backend_is_reported(self) -> None:
        self.assertIn(json.BACKEND, ("orjson", "ujson", "json"))


if __name__ == "__main__":
    unittest.main()
