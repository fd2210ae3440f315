import argparse
import logging
import random
import sys

from generator import prompts
from generator.random_file import RandomDataFileGenerator
from utils.file_utils import format_gb
from utils.logger import get_logger

logger = logging.getLogger(__name__)


def file_name_arg(value):
    if not prompts.is_valid_file_name(value):
        raise argparse.ArgumentTypeError(prompts.FILE_NAME_ERROR)
    return value


def size_arg(value):
    if not prompts.is_valid_size(value):
        raise argparse.ArgumentTypeError(prompts.SIZE_ERROR)
    return prompts.parse_size(value)


def positive_int_arg(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="file-generator",
        description="Generate a text file of random 'Number. String' lines of a given size.")
    parser.add_argument('--output', type=file_name_arg, help="Output file name (prompted if omitted)")
    parser.add_argument('--size', type=size_arg, help="Target size in GB (prompted if omitted)")
    parser.add_argument('--seed', type=int, help="Seed for reproducible output")
    parser.add_argument('--max-attempts', type=positive_int_arg,
                        help="Give up after this many invalid answers to a prompt")
    parser.add_argument('--progress', action='store_true', help="Show a progress bar")
    parser.add_argument('--log-level', default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    get_logger("generator", getattr(logging, args.log_level))

    generator = None
    try:
        output_file = args.output or prompts.ask_file_name(max_attempts=args.max_attempts)
        target_size_in_gb = args.size or prompts.ask_size(max_attempts=args.max_attempts)

        rng = random.Random(args.seed)
        generator = RandomDataFileGenerator(output_file, target_size_in_gb, rng=rng,
                                            show_progress=args.progress)
        generator.generate_file()
    except prompts.InputError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        if generator is not None:
            logger.warning(f"Interrupted, {generator.output_file} is incomplete")
        else:
            logger.warning("Interrupted")
        return 130

    print(f"File generated: {output_file} ({format_gb(target_size_in_gb)} GB)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
