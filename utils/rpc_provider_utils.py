from urllib.parse import urlparse

import aiohttp
from web3 import AsyncHTTPProvider
from web3.providers.async_base import AsyncBaseProvider

from constants.constants import DEFAULT_RPC_TIMEOUT
from utils.logger_utils import get_logger

logger = get_logger("RPC Provider Utils")


def get_async_provider_from_uri(uri_string: str, timeout: int = DEFAULT_RPC_TIMEOUT) -> AsyncBaseProvider:
    """
    Creates an asynchronous Web3 provider based on the URI scheme.
    Only HTTP/HTTPS JSON-RPC endpoints are supported.
    No request is made here; the session is opened lazily on the first call.
    """
    uri = urlparse(uri_string)

    if uri.scheme == "http" or uri.scheme == "https":
        request_kwargs = {"timeout": aiohttp.ClientTimeout(total=timeout)}
        logger.debug(f"Using AsyncHTTPProvider for {uri.netloc} (timeout={timeout}s)")
        return AsyncHTTPProvider(uri_string, request_kwargs=request_kwargs)
    else:
        raise ValueError(f"Unknown uri scheme {uri_string}. Supported: http, https")
