"""Stream processing for JSON and JSONL input.

This module contains process_stream, which reads JSON documents from a file
and writes each one pretty-printed to an output stream.
"""

from __future__ import annotations

import json
import sys
from typing import TextIO

from loguru import logger

from .data import RenderConfig, to_pretty
from .render import write


def _emit(value: object, config: RenderConfig, output: TextIO) -> None:
    write(output, to_pretty(value, config), config.max_line, config.tab_size)
    output.write("\n")


def process_stream(
    input_file: TextIO,
    config: RenderConfig,
    output: TextIO | None = None,
    jsonl: bool = False,
    tail_lines: int = 0,
) -> int:
    """Pretty-print JSON read from ``input_file``.

    Args:
        input_file: File-like object to read from
        config: Rendering configuration
        output: Destination stream (default: stdout)
        jsonl: Treat every line as a separate document
        tail_lines: If > 0 (JSONL only), only process the last N lines

    Returns:
        Number of values written.

    Raises:
        json.JSONDecodeError: If the input is not JSONL and is not valid JSON
    """
    output = output if output is not None else sys.stdout

    if not jsonl:
        data = json.load(input_file)
        _emit(data, config, output)
        return 1

    # If tail_lines specified, read all and take last N
    if tail_lines > 0:
        all_lines = input_file.readlines()
        lines_to_process = all_lines[-tail_lines:]
        start_line_num = max(0, len(all_lines) - tail_lines)
    else:
        lines_to_process = input_file
        start_line_num = 0

    line_num = start_line_num
    written = 0

    for line in lines_to_process:
        line_num += 1
        line = line.strip()

        if not line:
            continue

        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            print(f"warning: invalid JSON on line {line_num}", file=sys.stderr)
            continue

        logger.debug("rendering line {}", line_num)
        _emit(data, config, output)
        written += 1

    return written
