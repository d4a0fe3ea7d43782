import logging

import requests

from slotutils.config import ClientConfig
from slotutils.errors import NetworkError

logger = logging.getLogger(__name__)


def fetch(url, config=None):
    """
    This function
        1. Sends a single GET request to url,
        2. Reads the full response body, and
        3. Returns it as bytes, whatever the status code
    """
    config = config or ClientConfig()
    logger.debug(f"GET {url}")
    try:
        resp = requests.get(url, headers=config.headers, timeout=config.timeout)
        body = resp.content
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Request to {url} failed: {e}") from e

    logger.debug(f"Response Code: {resp.status_code} ({len(body)} bytes)")
    return body
