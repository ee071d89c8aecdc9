"""
Main CLI module with argument parsing and command execution.

This module provides the CLI interface including:
- The ``solid-city`` command with ``list`` and ``run`` actions
- Three no-argument entry points, one per example group
"""
import argparse
import sys
from typing import Any, Dict, List, Optional

from solid_city._package import PACKAGE_NAME, VERSION
from solid_city.application.examples import example_names
from solid_city.application.service import ExampleApplicationService
from solid_city.cli.formatters import format_output
from solid_city.config.manager import get_config_manager
from solid_city.config.schemas import OUTPUT_FORMATS, AppConfig
from solid_city.domain.core.exceptions import ContractViolationError, DomainException
from solid_city.infrastructure.console import StdoutConsole
from solid_city.infrastructure.logging.logger import get_logger, setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description="Solid City - paired bad/good examples of object-oriented design principles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all examples
  %(prog)s list --format table               # Display as table
  %(prog)s run substitution                  # Run the recommended design
  %(prog)s run lsp --counter-example         # Run the anti-pattern
  %(prog)s run ocp --format json             # Capture output as JSON
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Set logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    subparsers = parser.add_subparsers(dest='action', help='Available actions')

    list_parser = subparsers.add_parser('list', help='List all examples')
    list_parser.add_argument('--format', choices=['table', 'json', 'yaml', 'text'],
                             default='table', help='Output format')

    run_parser = subparsers.add_parser('run', help='Run an example')
    run_parser.add_argument('example', choices=example_names(), type=str.lower,
                            help='Example name or alias')
    run_parser.add_argument('--counter-example', action='store_true',
                            help='Run the anti-pattern instead of the recommended design')
    run_parser.add_argument('--format', choices=OUTPUT_FORMATS,
                            help='Output format (default from configuration)')

    return parser.parse_args(argv)


def load_config(config_file: Optional[str], log_level: Optional[str] = None) -> AppConfig:
    """Load configuration and set up logging from it."""
    app_config = get_config_manager(config_file).get_app_config()
    logging_config = app_config.logging
    if log_level:
        logging_config = logging_config.model_copy(update={"level": log_level})
    setup_logging(logging_config)
    return app_config


def execute_command(args: argparse.Namespace, app_config: AppConfig) -> Optional[Dict[str, Any]]:
    """Execute the requested action and return a result to format, if any."""
    service = ExampleApplicationService(console=StdoutConsole())

    if args.action == 'list':
        return {"examples": service.describe_examples()}

    if args.action == 'run':
        output_format = args.format or app_config.console.default_format
        if output_format == 'text':
            # Lines reach stdout before any contract violation surfaces.
            service.run_example(args.example, counter_example=args.counter_example)
            return None
        lines = service.capture_example(args.example, counter_example=args.counter_example)
        return {
            "example": args.example,
            "counter_example": args.counter_example,
            "output": lines,
        }

    raise ValueError(f"Unknown command: {args.action}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.action:
            print("Error: No action specified. Use --help for usage information.", file=sys.stderr)
            sys.exit(1)

        logger = get_logger(__name__)

        try:
            app_config = load_config(args.config, args.log_level)
            result = execute_command(args, app_config)
        except ContractViolationError as e:
            logger.debug("Contract violation", error=str(e), variant=e.variant)
            output_format = args.format or app_config.console.default_format
            if output_format != 'text':
                # Text output was already streamed line by line.
                print(format_output({
                    "example": args.example,
                    "counter_example": args.counter_example,
                    "output": e.output,
                    "error": str(e),
                }, output_format))
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except DomainException as e:
            logger.debug("Domain error", error=str(e), error_type=type(e).__name__)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if result is not None:
            output_format = getattr(args, 'format', None) or app_config.console.default_format
            print(format_output(result, output_format))

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


def _run_single(example: str) -> None:
    """Run one example with no arguments, as the original programs did."""
    try:
        load_config(None)
        ExampleApplicationService(console=StdoutConsole()).run_example(example)
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def run_substitution() -> None:
    """Entry point for ``solid-city-lsp``."""
    _run_single("substitution")


def run_extension() -> None:
    """Entry point for ``solid-city-ocp``."""
    _run_single("extension")


def run_responsibility() -> None:
    """Entry point for ``solid-city-srp``."""
    _run_single("responsibility")


if __name__ == "__main__":
    main()
