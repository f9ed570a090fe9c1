"""Outbound HTTP helpers for render callbacks that scrape remote JSON"""
from typing import Optional, Type, TypeVar
import httpx
from pydantic import TypeAdapter
from logging_config import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


async def fetch_text(request: httpx.Request, client: Optional[httpx.AsyncClient] = None) -> str:
    """Send request and return the decoded response body"""
    if client is None:
        async with httpx.AsyncClient() as owned_client:
            return await fetch_text(request, owned_client)

    response = await client.send(request)
    logger.debug("Received response", url=str(request.url), status_code=response.status_code)
    text = response.text
    logger.debug("Extracted body", body=text)
    return text


async def fetch_model(request: httpx.Request, model: Type[T], client: Optional[httpx.AsyncClient] = None) -> T:
    """Send request and deserialize the JSON body into model"""
    text = await fetch_text(request, client)
    obj = TypeAdapter(model).validate_json(text)
    logger.debug("Deserialized response", model=getattr(model, "__name__", str(model)))
    return obj
