from dataclasses import dataclass, field
from typing import Dict, Optional

from slotutils.urls import BASE_URL


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings shared by the fetcher, the decoders and the prompts.

    The defaults reproduce a bare HTTP client: no timeout, no retries and
    no extra request headers. A prompt_timeout of None lets prompts wait
    for the user forever.
    """

    base_url: str = BASE_URL
    timeout: Optional[float] = None
    headers: Dict[str, str] = field(default_factory=dict)
    prompt_timeout: Optional[int] = None

