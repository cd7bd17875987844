from throttled_reader.budget import UNLIMITED, Budget, Limited
from throttled_reader.exceptions import ReadThrottled
from throttled_reader.io_typing import ReadableSource
from throttled_reader.log import init_logging
from throttled_reader.reader import ThrottledReader, wrap

__all__ = [
    "UNLIMITED", "Budget", "Limited",
    "ReadThrottled",
    "ReadableSource",
    "init_logging",
    "ThrottledReader", "wrap",
]
