"""Count words across many lines in parallel"""
from __future__ import annotations

import logging
import math
import multiprocessing
from typing import Iterable, List, Mapping, Sequence

from tqdm.contrib.concurrent import process_map

from model import FrequencyTable, ProcessingError, Word
from words import words

DEFAULT_WORKERS = multiprocessing.cpu_count()
MIN_BLOCK_SIZE = 1000  # Lines per block; smaller inputs are not worth a process

LOGGER = logging.getLogger('wordcount.tally')


def partition(lines: Sequence[str], workers: int, min_block_size: int = MIN_BLOCK_SIZE) -> List[Sequence[str]]:
    """ Contiguous blocks, at most one per worker, covering every line once"""
    n = len(lines)
    if not n:
        return []
    block_size = max(math.ceil(n / workers), min_block_size, 1)
    n_blocks = math.ceil(n / block_size)
    assert n_blocks <= workers

    return [
        lines[i * block_size: min((i + 1) * block_size, n)] for i in range(n_blocks)
    ]


def count_block(lines: Sequence[str]) -> FrequencyTable:
    table = FrequencyTable()
    for line in lines:
        table.update(words(line))
    return table


def aggregate(lines: Iterable[str], workers: int = None, min_block_size: int = None,
              show_progress: bool = False) -> Mapping[Word, int]:
    if workers is None:
        workers = DEFAULT_WORKERS
    if workers < 1:
        raise ValueError(f'Invalid worker count: {workers}')
    if min_block_size is None:
        min_block_size = MIN_BLOCK_SIZE

    lines = list(lines)
    blocks = partition(lines, workers, min_block_size)
    LOGGER.info(f'Counting {len(lines)} lines in {len(blocks)} blocks using up to {workers} workers')

    try:
        if len(blocks) > 1:
            partials = process_map(count_block, blocks, max_workers=workers, chunksize=1,
                                   desc='Counting words', disable=not show_progress)
        else:
            partials = [count_block(b) for b in blocks]
    except Exception as err:
        raise ProcessingError(f'Could not count words: {err}') from err

    # All workers have finished; merge the shards here
    table = FrequencyTable.combine(partials)
    LOGGER.info(f'Found {len(table)} distinct words, {table.total_words()} in total')
    return table.freeze()
