import json
from typing import Any, Dict, Optional

import aiohttp

from offline_scheduler.invokers.protocol import InvocationError, Invoker


class LambdaHttpInvoker(Invoker):
    """
    Invoker calling a local Lambda-compatible endpoint (e.g. serverless-offline) using aiohttp.
    """

    def __init__(self, endpoint: str = "http://localhost:3002", headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
        self.endpoint = endpoint.rstrip("/")
        self.headers: Dict[str, str] = headers or {}
        self.timeout = timeout

    def url_for(self, function_name: str) -> str:
        return f"{self.endpoint}/2015-03-31/functions/{function_name}/invocations"

    async def invoke(self, function_name: str, payload: Dict[str, Any]) -> Any:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.url_for(function_name), headers=self.headers, json=payload) as response:
                    body = await response.text()
                    if response.status >= 300:
                        raise InvocationError(function_name, f"HTTP {response.status}: {body}", details={"status": response.status})
                    if response.headers.get("X-Amz-Function-Error"):
                        raise InvocationError(function_name, f"Function error: {body}", details={"status": response.status})
        except aiohttp.ClientError as e:
            raise InvocationError(function_name, f"Request failed: {e}") from e

        try:
            return json.loads(body) if body else None
        except ValueError:
            return body
