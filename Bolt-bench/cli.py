"""
Command line interface for the Bolt / S3 comparative benchmark.
"""

import os
import sys
import json
import logging
import argparse

import uvloop

# Add the current directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from configuration import (
    DEFAULT_REQUEST_TYPE, DEFAULT_NUM_KEYS, DEFAULT_OBJ_LENGTH,
    DEFAULT_LIST_ITERATIONS, DEFAULT_PROMETHEUS_PORT, BASELINE_NAME, PROXY_NAME
)
from common.request import REQUEST_TYPES

# Set up logging (only if not already configured)
if not logging.root.handlers:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class BoltBenchmarkCLI:
    """CLI interface for the Bolt / S3 benchmark."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        """Create the main argument parser."""
        parser = argparse.ArgumentParser(
            description='Bolt / S3 Comparative Benchmark CLI',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Put, delete, list and get performance of Bolt vs S3
  python cli.py perf --bucket my-bucket

  # First-byte latency of reads on up to 100 existing objects
  python cli.py perf --request-type get_object_ttfb --bucket my-bucket --num-keys 100

  # Compare the content of one object through Bolt and S3
  python cli.py validate --bucket my-bucket --key data/part-0001.gz

  # Time until a damaged object is readable through Bolt again
  python cli.py autoheal --bucket my-bucket --key data/part-0001.gz

  # Single operation against Bolt
  python cli.py ops --sdk-type bolt --request-type head_bucket --bucket my-bucket
            """
        )

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # Perf command
        perf_parser = subparsers.add_parser('perf', help='Comparative performance test')
        perf_parser.add_argument('--request-type', type=str.upper, default=DEFAULT_REQUEST_TYPE,
                                 help=f'Workload to run, one of {", ".join(REQUEST_TYPES)}; '
                                      f'any other type yields an empty report (default: {DEFAULT_REQUEST_TYPE})')
        perf_parser.add_argument('--bucket', type=str, required=True,
                                 help='Bucket to benchmark')
        perf_parser.add_argument('--num-keys', type=str, default=str(DEFAULT_NUM_KEYS),
                                 help=f'Number of keys, at most 1000 (default: {DEFAULT_NUM_KEYS})')
        perf_parser.add_argument('--obj-length', type=str, default=str(DEFAULT_OBJ_LENGTH),
                                 help=f'Payload length of uploaded objects (default: {DEFAULT_OBJ_LENGTH})')
        perf_parser.add_argument('--num-iter', type=str, default=str(DEFAULT_LIST_ITERATIONS),
                                 help=f'Listings per backend in the list phase (default: {DEFAULT_LIST_ITERATIONS})')
        perf_parser.add_argument('--prometheus-port', type=int, default=DEFAULT_PROMETHEUS_PORT,
                                 help='Expose per-request metrics on this port (0 = disabled)')

        # Validate command
        validate_parser = subparsers.add_parser('validate', help='Compare object content via Bolt and S3')
        validate_parser.add_argument('--bucket', type=str, required=True, help='Bucket name')
        validate_parser.add_argument('--key', type=str, required=True, help='Object key')
        validate_parser.add_argument('--bucket-clean', choices=['ON', 'OFF'], type=str.upper, default='OFF',
                                     help='Skip the S3 read when the bucket has been cleaned (default: OFF)')

        # Auto-heal command
        autoheal_parser = subparsers.add_parser('autoheal', help='Time until a Bolt read succeeds')
        autoheal_parser.add_argument('--bucket', type=str, required=True, help='Bucket name')
        autoheal_parser.add_argument('--key', type=str, required=True, help='Object key')

        # Ops command
        ops_parser = subparsers.add_parser('ops', help='Single object or bucket operation')
        ops_parser.add_argument('--sdk-type', choices=[BASELINE_NAME, PROXY_NAME], type=str.lower,
                                default=BASELINE_NAME, help=f'Backend to use (default: {BASELINE_NAME})')
        ops_parser.add_argument('--request-type', type=str, required=True,
                                help='get_object, list_objects_v2, head_object, list_buckets, '
                                     'head_bucket, put_object or delete_object')
        ops_parser.add_argument('--bucket', type=str, default='', help='Bucket name')
        ops_parser.add_argument('--key', type=str, default='', help='Object key')
        ops_parser.add_argument('--value', type=str, default='', help='Object content for put_object')

        return parser

    async def run_perf(self, args):
        """Run the comparative performance test."""
        from commands.perf import PerfBenchmark

        exporter = None
        if args.prometheus_port:
            from persistence.prom import SimplePrometheusExporter
            exporter = SimplePrometheusExporter(port=args.prometheus_port)
            exporter.start_server()

        benchmark = PerfBenchmark(exporter=exporter)
        return await benchmark.process_event({
            'requestType': args.request_type,
            'bucket': args.bucket,
            'numKeys': args.num_keys,
            'objLength': args.obj_length,
            'numIter': args.num_iter,
        })

    async def run_validate(self, args):
        """Run the data validation check."""
        from commands.validate import ObjectValidator

        return await ObjectValidator().process_event({
            'bucket': args.bucket,
            'key': args.key,
            'bucketClean': args.bucket_clean,
        })

    async def run_autoheal(self, args):
        """Run the auto-heal probe."""
        from commands.autoheal import AutoHealProbe

        return await AutoHealProbe().process_event({'bucket': args.bucket, 'key': args.key})

    async def run_ops(self, args):
        """Run a single operation."""
        from commands.ops import ObjectOps

        return await ObjectOps().process_event({
            'sdkType': args.sdk_type,
            'requestType': args.request_type,
            'bucket': args.bucket,
            'key': args.key,
            'value': args.value,
        })

    def run(self, args=None):
        """Run the CLI with the given arguments."""
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        commands = {
            'perf': self.run_perf,
            'validate': self.run_validate,
            'autoheal': self.run_autoheal,
            'ops': self.run_ops,
        }

        try:
            result = uvloop.run(commands[parsed_args.command](parsed_args))
        except KeyboardInterrupt:
            logger.info("Operation interrupted by user")
            return 1
        except Exception as e:
            logger.error(f"Error in {parsed_args.command}: {e}")
            return 1

        print(json.dumps(result, indent=2, default=str))
        return 0


def main():
    """Main entry point."""
    cli = BoltBenchmarkCLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()
