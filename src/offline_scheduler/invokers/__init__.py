from .protocol import Invoker, InvocationError
from .callable import CallableInvoker
from .serverless import ServerlessInvoker
from .http import LambdaHttpInvoker

__all__ = ["Invoker", "InvocationError", "CallableInvoker", "ServerlessInvoker", "LambdaHttpInvoker"]
