"""Revalidation over HTTP.

Revalidated paths are sent back to the renderer in a response header, one
header line per path.
"""

import logfire
from fastapi import Response

from chatter.domain.service import Revalidate


def header_revalidator(response: Response, header: str) -> Revalidate:
    """Build a revalidation callback that writes to ``response`` headers.

    Args:
        response: Response of the current request
        header: Header name, e.g. "X-Revalidate-Path"

    Returns:
        Callback appending one header per revalidated path
    """

    def revalidate(path: str) -> None:
        response.headers.append(header, path)
        logfire.info("Path revalidated", path=path)

    return revalidate
