import logging
import math
import re

FILE_NAME_PROMPT = "Enter the output file name (e.g., output.txt): "
FILE_NAME_ERROR = "Invalid file name."
SIZE_PROMPT = "Enter the size of the file in GB: "
SIZE_ERROR = "Invalid size."

# Base name of word chars, hyphens, dots or spaces, then a dot and an ASCII extension
FILE_NAME_PATTERN = re.compile(r"[\w\-. ]+\.[a-zA-Z0-9]+")
# Plain ASCII decimal, optional exponent; no digit separators
SIZE_PATTERN = re.compile(r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when no valid answer could be collected"""


class InputExhaustedError(InputError):
    pass


class TooManyAttemptsError(InputError):
    pass


def get_validated_input(input_message, error_message, validation_logic, parse_input=None,
                        *, max_attempts=None, read=input, write=print):
    """
    Ask until the answer passes validation_logic.

    Blank answers are always rejected. Returns the raw string, or
    parse_input(answer) when a parser is given. End of input raises
    InputExhaustedError; max_attempts bad answers in a row raise
    TooManyAttemptsError.
    """
    attempts = 0
    while True:
        try:
            answer = read(input_message)
        except EOFError:
            raise InputExhaustedError(f"No input left while waiting for: {input_message.strip()}") from None

        if answer and not answer.isspace() and validation_logic(answer):
            return parse_input(answer) if parse_input is not None else answer

        logger.debug(f"Rejected input {answer!r}")
        write(error_message)

        attempts += 1
        if max_attempts is not None and attempts >= max_attempts:
            raise TooManyAttemptsError(f"Gave up after {attempts} invalid answers")


def is_valid_file_name(file_name):
    if not file_name or file_name.isspace():
        return False
    return FILE_NAME_PATTERN.fullmatch(file_name) is not None


def parse_size(text):
    """Parse a size in GB written in the invariant number format"""
    if SIZE_PATTERN.fullmatch(text) is None:
        raise ValueError(f"not a decimal number: {text!r}")
    return float(text)


def is_valid_size(text):
    if not text or text.isspace():
        return False
    try:
        size = parse_size(text)
    except ValueError:
        return False
    return math.isfinite(size) and size > 0


def ask_file_name(max_attempts=None, read=input, write=print):
    return get_validated_input(FILE_NAME_PROMPT, FILE_NAME_ERROR, is_valid_file_name,
                               max_attempts=max_attempts, read=read, write=write)


def ask_size(max_attempts=None, read=input, write=print):
    return get_validated_input(SIZE_PROMPT, SIZE_ERROR, is_valid_size, parse_size,
                               max_attempts=max_attempts, read=read, write=write)
