"""Lint fix API command."""

import asyncio
from collections.abc import Iterator
from pathlib import Path

import httpx

from ...utils.logger import get_logger
from ..StageResult import StageResult
from . import LintFixOutput
from ._load_rule_config import _load_rule_config
from .apply_fixes import apply_fixes
from .lint_text import lint_text

logger = get_logger("lint.cmd_fix")


def cmd_fix(
    path: str,
    check_relative: bool | None = None,
    base_uri: str | None = None,
    ignore: list[str] | None = None,
    dry_run: bool = False,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StageResult:
    """Rewrite permanently redirected links in a file to their final destination."""

    def _fail(result_obj: StageResult, file_path: Path, error: str, summary: str) -> None:
        result_obj.output = LintFixOutput(
            path=str(file_path), written=False, fixed=[], remaining=[], errors=[error]
        ).model_dump(mode="json")
        result_obj.result = summary
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().resolve()

        yield (0.1, "Loading configuration...")
        try:
            config = _load_rule_config(check_relative, base_uri, ignore)
        except ValueError as e:
            _fail(result_obj, file_path, str(e), f"Invalid configuration: {e}")
            return

        yield (0.2, "Reading file...")
        if not file_path.exists():
            _fail(result_obj, file_path, "File does not exist", f"File not found: {path}")
            return

        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            _fail(result_obj, file_path, f"Cannot read file: {e}", f"Error reading file: {e}")
            return

        yield (0.4, "Checking links...")
        messages = asyncio.run(
            lint_text(text, config.rule, mode="fixer", transport=transport, timeout=config.http.timeout)
        )

        yield (0.8, "Applying fixes...")
        fixed_text, fixed, remaining = apply_fixes(text, messages)
        written = False
        if fixed and not dry_run:
            try:
                file_path.write_text(fixed_text, encoding="utf-8")
            except OSError as e:
                _fail(result_obj, file_path, f"Cannot write file: {e}", f"Error writing file: {e}")
                return
            written = True
            logger.info("Rewrote %d redirected link(s) in %s", len(fixed), file_path)

        result_obj.output = LintFixOutput(
            path=str(file_path), written=written, fixed=fixed, remaining=remaining, errors=[]
        ).model_dump(mode="json")
        verb = "Would fix" if dry_run else "Fixed"
        result_obj.result = f"{verb} {len(fixed)} link(s), {len(remaining)} problem(s) remaining in {file_path.name}"
        result_obj.success = not remaining

    return StageResult(announce=f"Fixing links in {path}...", progress_callback=do_work)
