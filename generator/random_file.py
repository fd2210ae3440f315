# random_file.py
import logging
import os
import random
from typing import Optional

from tqdm import tqdm

from utils.file_utils import ENCODING, gb_to_bytes, line_byte_length, get_file_size, format_size

SAMPLE_STRINGS = ("Apple", "Banana is yellow", "Cherry is the best", "Something something something")
MIN_NUMBER = 1
MAX_NUMBER = 99999
PROGRESS_UPDATE_LINES = 10_000

logger = logging.getLogger(__name__)


class RandomDataFileGenerator:
    """Writes random "Number. String" lines until the file reaches the target size"""

    def __init__(self, output_file, target_size_in_gb: float, rng: Optional[random.Random] = None,
                 newline: str = os.linesep, show_progress: bool = False):
        self.output_file = output_file
        self.target_size_in_gb = target_size_in_gb
        self.target_size_in_bytes = gb_to_bytes(target_size_in_gb)
        self.rng = rng if rng is not None else random.Random()
        self.newline = newline
        self.show_progress = show_progress

    def generate_random_data(self) -> str:
        """Build one line from the sample set"""
        number = self.rng.randint(MIN_NUMBER, MAX_NUMBER)
        text = self.rng.choice(SAMPLE_STRINGS)
        return f"{number}. {text}"

    def generate_file(self) -> int:
        """Write the output file and return the number of bytes written"""
        logger.info(f"Generating {self.output_file} (target {self.target_size_in_bytes} bytes)")

        current_size = 0
        pending = 0
        lines = 0

        # newline="" so the terminator we count is the one that hits the disk
        with open(self.output_file, "w", encoding=ENCODING, newline="") as f, \
                tqdm(total=self.target_size_in_bytes, unit="B", unit_scale=True,
                     disable=not self.show_progress) as progress:
            while current_size < self.target_size_in_bytes:
                line = self.generate_random_data()
                f.write(line + self.newline)

                written = line_byte_length(line, self.newline)
                current_size += written
                pending += written
                lines += 1

                if lines % PROGRESS_UPDATE_LINES == 0:
                    progress.update(pending)
                    pending = 0

            progress.update(pending)

        logger.info(f"Wrote {lines} lines, {format_size(get_file_size(self.output_file))} to {self.output_file}")
        return current_size
