"""Lint check API command."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

import httpx

from ..StageResult import StageResult
from . import LintCheckOutput
from ._load_rule_config import _load_rule_config
from .lint_text import lint_text


def cmd_check(
    path: str,
    check_relative: bool | None = None,
    base_uri: str | None = None,
    ignore: list[str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Check every link in a file and report dead or redirected ones."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().resolve()

        yield (0.1, "Loading configuration...")
        try:
            config = _load_rule_config(check_relative, base_uri, ignore)
        except ValueError as e:
            result_obj.output = LintCheckOutput(path=str(file_path), messages=[], errors=[str(e)]).model_dump(
                mode="json"
            )
            result_obj.result = f"Invalid configuration: {e}"
            result_obj.success = False
            return

        yield (0.2, "Reading file...")
        if not file_path.exists():
            result_obj.output = LintCheckOutput(
                path=str(file_path), messages=[], errors=["File does not exist"]
            ).model_dump(mode="json")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return

        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            result_obj.output = LintCheckOutput(
                path=str(file_path), messages=[], errors=[f"Cannot read file: {e}"]
            ).model_dump(mode="json")
            result_obj.result = f"Error reading file: {e}"
            result_obj.success = False
            return

        yield (0.4, "Checking links...")
        messages = asyncio.run(
            lint_text(text, config.rule, transport=transport, timeout=config.http.timeout)
        )

        result_obj.output = LintCheckOutput(path=str(file_path), messages=messages, errors=[]).model_dump(
            mode="json"
        )
        if messages:
            result_obj.result = f"Found {len(messages)} problem(s) in {file_path.name}"
            result_obj.success = False
        else:
            result_obj.result = f"No dead links in {file_path.name}"
            result_obj.success = True

    return StageResult(announce=f"Checking links in {path}...", progress_callback=do_work)
