from typing import Dict, Optional
import httpx

def client(
    base_url: str = "",
    headers: Optional[Dict[str, str]] = None,
    timeout_sec: int = 15,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout_sec)
