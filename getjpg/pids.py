"""
Read the list of image pids, one per line.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


def read_pids(path: str) -> List[str]:
    """Return every line of the pid file in order, without line terminators.

    Empty lines and duplicates are kept as they are. A leading BOM is
    dropped and bytes that are not UTF-8 pass through as surrogate escapes.
    """
    pids = []
    with open(path, 'r', encoding='utf-8-sig', errors='surrogateescape', newline='\n') as f:
        for line in f:
            if line.endswith('\n'):
                line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]
            pids.append(line)

    logger.debug(f"Read {len(pids)} pids from {path}")
    return pids
