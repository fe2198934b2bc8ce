import inspect
from typing import Any, Callable, Dict

from offline_scheduler.invokers.protocol import Invoker


class CallableInvoker(Invoker):
    """
    Adapts a plain function ``(function_name, payload) -> result``, sync or async.
    """

    def __init__(self, func: Callable[[str, Dict[str, Any]], Any]):
        self.func = func

    async def invoke(self, function_name: str, payload: Dict[str, Any]) -> Any:
        result = self.func(function_name, payload)
        if inspect.isawaitable(result):
            result = await result
        return result
