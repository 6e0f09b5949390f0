# src/api/http.py
import logging
from typing import Any

import requests

from src.config import HTTP_TIMEOUT_S, USER_AGENT
from src.utils import report_error

logger = logging.getLogger("auroraweather")


def http_get_json(
    url: str, params: dict[str, Any] | None = None, timeout: float = HTTP_TIMEOUT_S
) -> Any:
    """GET `url` and return the decoded JSON body.

    Non-2xx responses raise `requests.HTTPError`. Every failure is reported
    and re-raised; there is no retry.
    """
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        resp.raise_for_status()
        logger.debug("GET %s -> %s", url, resp.status_code)
        return resp.json()
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise
