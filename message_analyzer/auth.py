from fastapi import Header, HTTPException
from typing import Optional
import os
from dotenv import load_dotenv

load_dotenv()


def get_configured_api_key() -> Optional[str]:
    return os.getenv("ANALYZER_API_KEY") or None


async def get_api_key(x_api_key: Optional[str] = Header(default=None, alias="x-api-key")):
    """
    Validate API key from x-api-key header.
    Authentication is disabled when ANALYZER_API_KEY is not set.
    """
    api_key = get_configured_api_key()
    if api_key and x_api_key != api_key:
        raise HTTPException(status_code=403, detail="Invalid API Key")
    return x_api_key
