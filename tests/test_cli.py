import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from pydantic import ValidationError

from pairtree.api.cli import main
from pairtree.api.query import make_predicate
from pairtree.api.schemas import TreePayload
from pairtree.data.tree import from_levels


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, payload: dict) -> str:
        path = os.path.join(self.tmp.name, 'tree.json')
        with open(path, 'w') as f:
            json.dump(payload, f)
        return path

    def run_cli(self, *argv: str) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue().strip()

    def test_size(self):
        path = self.write({'leaves': [3, 1, 6, 0, 2, 5, 7]})
        self.assertEqual(self.run_cli('size', '-file', path), '7 leaves (depth 3)')

    def test_exists_and_find(self):
        path = self.write({'leaves': [3, 1, 4, 1, 5, 9, 2]})
        self.assertEqual(self.run_cli('exists', '-file', path, '-op', 'gt', '--value', '8'), 'True')
        self.assertEqual(self.run_cli('exists', '-file', path, '-op', 'lt', '--value', '1'), 'False')
        self.assertEqual(self.run_cli('find', '-file', path, '-op', 'even'), '4')
        self.assertEqual(self.run_cli('find', '-file', path, '-op', 'eq', '--value', '7'), 'No matching leaf.')

    def test_search(self):
        path = self.write({'leaves': [3, 1, 6, 0, 2, 5, 7]})
        self.assertEqual(self.run_cli('search', '-file', path, '-query', '5'), 'True')
        self.assertEqual(self.run_cli('search', '-file', path, '-query', '2.5'), 'False')

    def test_search_sorted_layout(self):
        path = self.write({'leaves': [7, 5, 2, 0, 6, 1, 3], 'layout': 'sorted'})
        self.assertEqual(self.run_cli('search', '-file', path, '-query', '5'), 'True')
        self.assertEqual(self.run_cli('search', '-file', path, '-query', '4'), 'False')

    def test_invalid_file_exits(self):
        path = self.write({'leaves': [1, 2]})
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(['size', '-file', path])
        self.assertEqual(ctx.exception.code, 1)

    def test_missing_file_exits(self):
        path = os.path.join(self.tmp.name, 'missing.json')
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            main(['search', '-file', path, '-query', '1'])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn('Invalid tree file', out.getvalue())

    def test_operator_requires_value(self):
        with self.assertRaises(ValueError):
            make_predicate('eq', None)
        self.assertTrue(make_predicate('odd', None)(3))


class TestTreePayload(unittest.TestCase):
    def test_level_layout(self):
        payload = TreePayload(leaves=[3, 1, 6, 0, 2, 5, 7])
        self.assertEqual(payload.to_tree(), from_levels([3, (1, 6), ((0, 2), (5, 7))]))

    def test_sorted_layout(self):
        payload = TreePayload(leaves=[7, 6, 5, 3, 2, 1, 0], layout='sorted')
        self.assertEqual(payload.to_tree(), from_levels([3, (1, 6), ((0, 2), (5, 7))]))

    def test_rejects_imperfect_counts(self):
        with self.assertRaises(ValidationError):
            TreePayload(leaves=[1, 2, 3, 4])
        with self.assertRaises(ValidationError):
            TreePayload(leaves=[1], layout='random')


if __name__ == '__main__':
    unittest.main()
