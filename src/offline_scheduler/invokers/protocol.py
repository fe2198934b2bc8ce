from typing import Any, Dict, Optional, Protocol


class InvocationError(Exception):
    """
    Raised when a function could not be invoked successfully.
    """
    def __init__(self, function_name: str, message: str, details: Optional[Any] = None):
        self.function_name = function_name
        self.details = details
        super().__init__(message)


class Invoker(Protocol):
    """
    Protocol class for function invokers.
    """

    async def invoke(self, function_name: str, payload: Dict[str, Any]) -> Any:
        """
        Invoke the given function once.

        Args:
            function_name (str): Name of the function to invoke.
            payload (Dict[str, Any]): Event payload passed to the function.

        Returns:
            Any: Invoker specific result.

        Raises:
            InvocationError: If the invocation failed.
        """
        ...
