import logging
import os

logger = logging.getLogger("vec2d")
from logging.handlers import RotatingFileHandler

log_file_env:str|None = os.environ.get("VEC2D_LOG_FILE", None)
if log_file_env:
    file_handler = RotatingFileHandler(log_file_env, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)

log_level_env:str|None = os.environ.get("LOG_LEVEL", None)
if log_level_env:
    levels_by_name = logging.getLevelNamesMapping()
    level = levels_by_name[log_level_env.upper()]

    logger.setLevel(level)
    logger.propagate = False
    handler = logging.StreamHandler()

    # Short console format
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)

else:
    logger.setLevel(logging.WARN)

# Submodules import `logger` from here, so it has to exist first.
from vec2d.contract import ROUND_DECIMALS, Vector2D
from vec2d.indexed import IndexedVector
from vec2d.reduced import ReducedPrecisionVector
from vec2d.field import FieldVector
from vec2d.helpers import IMPLEMENTATIONS, convert, create_vector, random_vector

# Names the vectors were originally published under
ArrayVector = IndexedVector
Float32Vector = ReducedPrecisionVector
ObjectVector = FieldVector

__all__ = [
    "logger",
    "ROUND_DECIMALS",
    "Vector2D",
    "IndexedVector",
    "ReducedPrecisionVector",
    "FieldVector",
    "ArrayVector",
    "Float32Vector",
    "ObjectVector",
    "IMPLEMENTATIONS",
    "create_vector",
    "convert",
    "random_vector",
]
