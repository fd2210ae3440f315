from utils.logger import get_logger

# Parent logger for every generator.* module; the CLI adjusts its level
get_logger(__name__)
