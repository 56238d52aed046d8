"""
Counts the words read from standard input.

Writes one "word count" line per distinct word, the most common first.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, TextIO

from model import RankedEntry, WordCountError, InputReadError, OutputWriteError
from ranking import rank, format_entries
from tally import aggregate, DEFAULT_WORKERS

LOGGER = logging.getLogger('wordcount')


def read_lines(stream: TextIO) -> List[str]:
    try:
        return [line[:-1] if line.endswith('\n') else line for line in stream]
    except (OSError, UnicodeDecodeError) as err:
        raise InputReadError(f'Could not read input: {err}') from err


def write_entries(entries: Iterable[RankedEntry], stream: TextIO):
    try:
        stream.write(''.join(format_entries(entries)))
        stream.flush()
    except (OSError, UnicodeEncodeError) as err:
        raise OutputWriteError(f'Could not write results: {err}') from err


def run(stdin: TextIO, stdout: TextIO, workers: int = None, show_progress: bool = False) -> int:
    """ Returns the exit status"""
    try:
        lines = read_lines(stdin)
        LOGGER.info(f'Read {len(lines)} lines')
        table = aggregate(lines, workers=workers, show_progress=show_progress)
        write_entries(rank(table), stdout)
    except WordCountError as err:
        LOGGER.error(err)
        return err.exit_status
    return 0


def configure_logging(level: str):
    LOGGER.propagate = False
    if not LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        LOGGER.addHandler(handler)
    LOGGER.setLevel(level)


def _worker_count(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, not {n}')
    return n


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Count words from standard input, most frequent first')
    parser.add_argument('--workers', type=_worker_count, default=DEFAULT_WORKERS,
                        help=f'number of worker processes (default {DEFAULT_WORKERS})')
    parser.add_argument('--progress', action='store_true', help='show a progress bar on stderr')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    return run(sys.stdin, sys.stdout, workers=args.workers, show_progress=args.progress)


if __name__ == '__main__':
    sys.exit(main())
