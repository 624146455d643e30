"""
Tests for the command line interface and the function entry points.
"""

import os
import sys
import unittest
from unittest.mock import AsyncMock, patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli import BoltBenchmarkCLI
import handler


class TestCLIParser(unittest.TestCase):
    """Test argument parsing."""

    def setUp(self):
        self.cli = BoltBenchmarkCLI()

    def test_perf_defaults(self):
        args = self.cli.parser.parse_args(['perf', '--bucket', 'bench'])
        self.assertEqual(args.request_type, 'ALL')
        self.assertEqual(args.num_keys, '1000')
        self.assertEqual(args.obj_length, '100')
        self.assertEqual(args.prometheus_port, 0)

    def test_perf_request_type_case_insensitive(self):
        args = self.cli.parser.parse_args(['perf', '--bucket', 'bench', '--request-type', 'get_object_ttfb'])
        self.assertEqual(args.request_type, 'GET_OBJECT_TTFB')

    def test_perf_accepts_unknown_type(self):
        args = self.cli.parser.parse_args(['perf', '--bucket', 'bench', '--request-type', 'copy_object'])
        self.assertEqual(args.request_type, 'COPY_OBJECT')

    def test_perf_unknown_type_prints_empty_report(self):
        """Unknown workloads produce an empty report without contacting a backend."""
        with patch('commands.perf.create_storage_system') as factory, \
                patch('builtins.print') as mock_print:
            code = self.cli.run(['perf', '--bucket', 'bench', '--request-type', 'copy_object'])

        self.assertEqual(code, 0)
        mock_print.assert_called_once_with('{}')
        factory.assert_not_called()

    def test_validate_bucket_clean(self):
        args = self.cli.parser.parse_args(['validate', '--bucket', 'b', '--key', 'k', '--bucket-clean', 'on'])
        self.assertEqual(args.bucket_clean, 'ON')

    def test_no_command(self):
        with patch('sys.stdout'):
            self.assertEqual(self.cli.run([]), 1)


class TestCLIRun(unittest.TestCase):
    """Test command dispatch."""

    def test_perf_event(self):
        with patch('commands.perf.PerfBenchmark.process_event', new_callable=AsyncMock) as process_event, \
                patch('builtins.print') as mock_print:
            process_event.return_value = {'s3_put_obj_perf_stats': {}}
            code = BoltBenchmarkCLI().run(['perf', '--bucket', 'bench', '--request-type', 'put_object',
                                           '--num-keys', '10'])

        self.assertEqual(code, 0)
        event = process_event.call_args[0][0]
        self.assertEqual(event['requestType'], 'PUT_OBJECT')
        self.assertEqual(event['bucket'], 'bench')
        self.assertEqual(event['numKeys'], '10')
        mock_print.assert_called_once()

    def test_failure_exit_code(self):
        with patch('commands.validate.ObjectValidator.process_event', new_callable=AsyncMock) as process_event:
            process_event.side_effect = ValueError('bucket and key are required')
            code = BoltBenchmarkCLI().run(['validate', '--bucket', 'b', '--key', 'k'])
        self.assertEqual(code, 1)

    def test_ops_event(self):
        with patch('commands.ops.ObjectOps.process_event', new_callable=AsyncMock) as process_event, \
                patch('builtins.print'):
            process_event.return_value = {}
            code = BoltBenchmarkCLI().run(['ops', '--sdk-type', 'BOLT', '--request-type', 'head_bucket',
                                           '--bucket', 'bench'])
        self.assertEqual(code, 0)
        event = process_event.call_args[0][0]
        self.assertEqual(event['sdkType'], 'bolt')
        self.assertEqual(event['requestType'], 'head_bucket')


class TestHandlers(unittest.TestCase):
    """Test the synchronous function entry points."""

    def test_perf_handler(self):
        with patch('handler.PerfBenchmark') as benchmark_cls:
            benchmark_cls.return_value.process_event = AsyncMock(return_value={'bolt_list_objects_v2_perf_stats': {}})
            result = handler.handle_perf_request({'requestType': 'list_objects_v2', 'bucket': 'bench'})
        self.assertEqual(result, {'bolt_list_objects_v2_perf_stats': {}})

    def test_auto_heal_handler(self):
        with patch('handler.AutoHealProbe') as probe_cls:
            probe_cls.return_value.process_event = AsyncMock(return_value={'auto_heal_time': '3 ms'})
            result = handler.handle_auto_heal_request({'bucket': 'b', 'key': 'k'}, None)
        self.assertEqual(result, {'auto_heal_time': '3 ms'})

    def test_errors_propagate(self):
        with patch('handler.ObjectValidator') as validator_cls:
            validator_cls.return_value.process_event = AsyncMock(side_effect=ValueError('bucket and key are required'))
            with self.assertRaises(ValueError):
                handler.handle_validate_request({})


if __name__ == '__main__':
    unittest.main()
