"""Liveness check for a single URI."""

import httpx

from ...utils.logger import get_logger
from .CheckResult import CheckResult

logger = get_logger("rule.is_alive")

# Compressed HEAD responses with an empty body break some decoders
_HEADERS = {"Accept-Encoding": "identity"}


async def is_alive(
    uri: str,
    method: str = "HEAD",
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = None,
) -> CheckResult:
    """Check whether ``uri`` is reachable.

    Redirects are not followed, except that a 301 triggers one more HEAD request
    with redirect following enabled to discover the final destination.

    Args:
        uri: Absolute URI to probe
        method: HTTP method for the first request
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
        timeout: Seconds before giving up, or None to wait indefinitely

    Returns:
        CheckResult. Any failure (DNS, TLS, timeouts, malformed URLs) is
        returned as a non-ok result, never raised.
    """
    try:
        async with httpx.AsyncClient(transport=transport, timeout=timeout, follow_redirects=False) as client:
            logger.debug("%s %s", method, uri)
            response = await client.request(method, uri, headers=_HEADERS)

            if response.status_code == httpx.codes.MOVED_PERMANENTLY:
                final = await client.request("HEAD", uri, headers=_HEADERS, follow_redirects=True)
                return CheckResult(
                    ok=final.is_success,
                    redirect=str(final.url),
                    message=_status_message(response),
                )

            return CheckResult(ok=response.is_success, message=_status_message(response))
    except Exception as exc:
        logger.info("%s %s failed: %r", method, uri, exc)
        return CheckResult(ok=False, message=str(exc) or type(exc).__name__)


def _status_message(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}"
