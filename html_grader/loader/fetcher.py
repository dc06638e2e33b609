# File: html_grader/loader/fetcher.py
"""
Fetcher module: retrieves a document with a single HTTP GET.

No retries are made. Without an explicit timeout the request waits for
the server as long as it takes.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientResponseError, ClientSession, ClientTimeout

from html_grader.config import DEFAULT_USER_AGENT
from html_grader.errors import FetchError
from html_grader.loader.models import Document
from html_grader.logger import logger


async def fetch_url(
    url: str,
    *,
    timeout: Optional[float] = None,
    user_agent: str = DEFAULT_USER_AGENT,
    session: Optional[ClientSession] = None,
) -> Document:
    """
    Fetch *url* and return its body.

    Raises FetchError on network failure, timeout or a non-2xx status.
    An existing *session* is used as-is and left open.
    """
    if session is None:
        async with ClientSession(
            timeout=ClientTimeout(total=timeout),
            headers={"User-Agent": user_agent},
        ) as own_session:
            return await _get(own_session, url)
    return await _get(session, url)


async def _get(session: ClientSession, url: str) -> Document:
    logger.info("GET %s", url)
    try:
        async with session.get(url) as resp:
            resp.raise_for_status()
            body = await resp.read()
            logger.debug("GET %s -> %s (%d bytes)", url, resp.status, len(body))
            return Document(url, body)
    except ClientResponseError as exc:
        logger.info("GET %s failed with status %s", url, exc.status)
        raise FetchError(url, f"{exc.status} {exc.message} ({url})") from exc
    except asyncio.TimeoutError as exc:
        logger.info("GET %s timed out", url)
        raise FetchError(url, f"Request to {url} timed out") from exc
    except ClientError as exc:
        logger.info("GET %s failed: %s", url, exc)
        raise FetchError(url, str(exc) or exc.__class__.__name__) from exc
    except ValueError as exc:
        # raised while encoding a malformed host, e.g. an empty IDNA label
        logger.info("GET %s failed: %s", url, exc)
        raise FetchError(url, str(exc) or exc.__class__.__name__) from exc
