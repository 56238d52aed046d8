import io
import sys

import tally
from wordcount import run, main, read_lines


def _run(text: str, workers: int = 1):
    out = io.StringIO()
    status = run(io.StringIO(text), out, workers=workers)
    return status, out.getvalue()


class BrokenInput(io.StringIO):
    def __iter__(self):
        raise OSError('device gone')


class BrokenOutput(io.StringIO):
    def write(self, s):
        raise BrokenPipeError('pipe closed')


def test_scenario_repeats():
    assert _run('one two three one two two') == (0, 'two 3\none 2\nthree 1\n')


def test_scenario_empty():
    assert _run('') == (0, '')


def test_scenario_punctuation():
    status, out = _run('Hello, World! hello world')
    assert status == 0
    assert out == 'hello 1\nhello, 1\nworld 1\nworld! 1\n'


def test_scenario_lines():
    assert _run('cat dog\ndog cat cat\n') == (0, 'cat 3\ndog 2\n')


def test_read_lines():
    assert read_lines(io.StringIO('a b\n\nc')) == ['a b', '', 'c']
    assert read_lines(io.StringIO('')) == []


def test_read_lines_universal_newlines():
    stream = io.TextIOWrapper(io.BytesIO(b'cat\r\ndog\rcat'))
    assert read_lines(stream) == ['cat', 'dog', 'cat']


def test_scenario_crlf():
    out = io.StringIO()
    assert run(io.TextIOWrapper(io.BytesIO(b'cat\r\ndog\r\ncat')), out, workers=1) == 0
    assert out.getvalue() == 'cat 2\ndog 1\n'


def test_same_output_in_parallel(monkeypatch):
    monkeypatch.setattr(tally, 'MIN_BLOCK_SIZE', 1)
    text = 'the cat\nthe dog\na cat and a dog\n' * 40
    assert _run(text, workers=1) == _run(text, workers=3)


def test_output_ordering():
    status, out = _run('b a c b c c d\nd d d e')
    counts = [int(line.split(' ')[1]) for line in out.splitlines()]
    assert counts == sorted(counts, reverse=True)
    assert sum(counts) == 11


def test_read_failure():
    out = io.StringIO()
    assert run(BrokenInput('cat'), out, workers=1) == 1
    assert out.getvalue() == ''


def test_processing_failure(monkeypatch):
    def broken(lines):
        raise MemoryError('out of memory')
    monkeypatch.setattr(tally, 'count_block', broken)
    out = io.StringIO()
    assert run(io.StringIO('cat'), out, workers=1) == 2
    assert out.getvalue() == ''


def test_write_failure():
    assert run(io.StringIO('cat'), BrokenOutput(), workers=1) == 3


def test_main(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('cat dog\ndog cat cat\n'))
    assert main(['--workers', '1']) == 0
    assert capsys.readouterr().out == 'cat 3\ndog 2\n'


def test_undecodable_input():
    out = io.StringIO()
    stdin = io.TextIOWrapper(io.BytesIO(b'cat \xff dog'), encoding='utf-8')
    assert run(stdin, out, workers=1) == 1
    assert out.getvalue() == ''


def test_unencodable_output():
    # Lowering the dotted capital I adds U+0307, which cp1254 cannot encode
    stdout = io.TextIOWrapper(io.BytesIO(), encoding='cp1254')
    assert run(io.StringIO('İstanbul'), stdout, workers=1) == 3
