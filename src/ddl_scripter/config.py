import logging
import os
from pathlib import Path

DATA_PATH = Path(__file__).parent / "data"
DICTIONARY_FILENAME = str(DATA_PATH / "dictionary.txt")
BIG_DICTIONARY_FILENAME = str(DATA_PATH / "bigworddictionary.txt")

DEFAULT_OPTIONS = "relaxed-table-options=False;extended-types=False"

LOG_LEVEL = logging.getLevelName(os.environ.get("DDL_SCRIPTER_LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO
