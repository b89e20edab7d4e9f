import os
import unittest
from unittest.mock import patch

from ppld.common import OutputResolutionError
from ppld.driver.output import determine_output_filename


class DetermineOutputTestCase(unittest.TestCase):
    def test_explicit_output(self):
        """ Test that a given output is always used """
        self.assertEqual('foo', determine_output_filename('foo', ['a.o']))
        self.assertEqual(
            'foo', determine_output_filename('foo', ['a.o', 'b.o']))

    def test_single_input(self):
        """ Test a.out next to a single input """
        self.assertEqual(
            os.path.join('/tmp', 'a.out'),
            determine_output_filename('', ['/tmp/x.o']))

    def test_single_relative_input(self):
        self.assertEqual(
            os.path.join(os.getcwd(), 'obj', 'a.out'),
            determine_output_filename('', [os.path.join('obj', 'x.o')]))

    def test_multiple_inputs(self):
        """ Test fallback to a.out with a warning """
        with self.assertLogs('output', level='WARNING') as cm:
            output = determine_output_filename('', ['/tmp/x.o', '/tmp/y.o'])
        self.assertEqual('a.out', output)
        self.assertIn('Use a.out for output file!', cm.output[0])

    def test_absolute_path_failure(self):
        """ Test that a failing path resolution raises an error """
        error = FileNotFoundError('No such file or directory')
        with patch('ppld.driver.output.os.path.abspath', side_effect=error):
            with self.assertRaises(OutputResolutionError) as cm:
                determine_output_filename('', ['x.o'])
        self.assertIn('x.o', cm.exception.msg)


if __name__ == '__main__':
    unittest.main()
