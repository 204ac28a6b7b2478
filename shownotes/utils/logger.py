import os
import sys
import logging

from shownotes.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"

# stdout carries the rendered document, so log lines go to stderr
handlers = [logging.StreamHandler(sys.stderr)]

logging_dir = os.getenv("SHOWNOTES_LOG_DIR")
if logging_dir:
    loging_path = os.path.join(logging_dir, "shownotes.log")
    if not os.path.exists(logging_dir):
        os.makedirs(logging_dir)
    handlers.append(logging.FileHandler(loging_path, encoding="utf-8"))

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format=logging_str,
    handlers=handlers,
)

logging = logging.getLogger('shownotes')
