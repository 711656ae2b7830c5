"""no-dead-link rule: report dead and permanently redirected URIs."""

import asyncio
from functools import partial
from urllib.parse import urljoin

from ...utils.logger import get_logger
from ..config.RuleConfig import RuleConfig
from .Candidate import Candidate
from .is_alive import is_alive
from .is_relative import is_relative
from .UriExtractor import UriExtractor

logger = get_logger("rule.no_dead_link")

BASE_URI_MISSING = "The base URI is not specified."


def no_dead_link(context, options: RuleConfig | dict | None = None) -> dict:
    """Build the rule's visitor for one document.

    Args:
        context: Host capabilities (``Syntax``, ``get_source``, ``report``,
            ``RuleError``, ``fixer``, ``transport``, ``timeout``)
        options: RuleConfig or a dict of its fields (camelCase keys accepted)

    Returns:
        Mapping from node kind to handler. The ``DOCUMENT_EXIT`` handler
        returns a coroutine that completes once every candidate was checked.
    """
    syntax = context.Syntax
    opts = options if isinstance(options, RuleConfig) else RuleConfig(**(options or {}))
    ignore = set(opts.ignore)
    check = partial(is_alive, transport=getattr(context, "transport", None), timeout=getattr(context, "timeout", None))
    extractor = UriExtractor(context.get_source)

    async def lint(candidate: Candidate) -> None:
        """Check a candidate's URI and report it if it is dead or redirected."""
        uri = candidate.uri
        if uri in ignore:
            return

        if is_relative(uri):
            if not opts.check_relative:
                return

            if not opts.base_uri:
                context.report(candidate.node, context.RuleError(BASE_URI_MISSING, index=0))
                return

            uri = urljoin(opts.base_uri, uri)
            if uri in ignore:
                return

        result = await check(uri)
        if not result.ok:
            # Some servers reject HEAD but serve GET
            result = await check(uri, "GET")

        if not result.ok:
            message = f"{uri} is dead. ({result.message})"
            context.report(candidate.node, context.RuleError(message, index=candidate.index))
        elif result.redirect:
            message = f"{uri} is redirected. ({result.message})"
            fix = context.fixer.replace_text_range(
                (candidate.index, candidate.index + len(candidate.uri)), result.redirect
            )
            context.report(candidate.node, context.RuleError(message, index=candidate.index, fix=fix))

    async def on_document_exit(node) -> None:
        candidates = list(extractor.candidates)
        outcomes = await asyncio.gather(*(lint(c) for c in candidates), return_exceptions=True)
        for candidate, outcome in zip(candidates, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Checking %s failed: %r", candidate.uri, outcome)

    return {
        syntax.STR: extractor.on_str,
        syntax.LINK: extractor.on_link,
        syntax.DOCUMENT_EXIT: on_document_exit,
    }


rule = {"linter": no_dead_link, "fixer": no_dead_link}
