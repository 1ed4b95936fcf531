import io
import json

import pytest

from pretty_tree import RenderConfig, process_stream


def test_single_document():
    out = io.StringIO()
    written = process_stream(io.StringIO('{"a": [1, 2]}'), RenderConfig(), output=out)
    assert written == 1
    assert out.getvalue() == '{"a": [1, 2]}\n'


def test_multiline_document():
    out = io.StringIO()
    process_stream(io.StringIO('[\n  1,\n  2\n]\n'), RenderConfig(), output=out)
    assert out.getvalue() == "[1, 2]\n"


def test_invalid_document_raises():
    with pytest.raises(json.JSONDecodeError):
        process_stream(io.StringIO("{not json"), RenderConfig(), output=io.StringIO())


def test_jsonl_skips_blank_and_invalid_lines(capsys):
    out = io.StringIO()
    source = io.StringIO('[1]\n\nnot json\n{"b": 2}\n')
    written = process_stream(source, RenderConfig(), output=out, jsonl=True)
    assert written == 2
    assert out.getvalue() == '[1]\n{"b": 2}\n'
    assert "warning: invalid JSON on line 3" in capsys.readouterr().err


def test_jsonl_tail_lines(capsys):
    out = io.StringIO()
    source = io.StringIO("1\n2\nbad\n")
    written = process_stream(source, RenderConfig(), output=out, jsonl=True, tail_lines=2)
    assert written == 1
    assert out.getvalue() == "2\n"
    assert "line 3" in capsys.readouterr().err


def test_jsonl_uses_config():
    out = io.StringIO()
    config = RenderConfig(max_line=6, tab_size=4)
    process_stream(io.StringIO("[1, 2, 3]\n"), config, output=out, jsonl=True)
    assert out.getvalue() == "[\n    1,\n    2,\n    3,\n]\n"


def test_defaults_to_stdout(capsys):
    process_stream(io.StringIO("[]"), RenderConfig())
    assert capsys.readouterr().out == "[]\n"
