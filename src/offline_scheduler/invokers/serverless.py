import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from offline_scheduler.invokers.protocol import InvocationError, Invoker

logger = logging.getLogger(__name__)


class ServerlessInvoker(Invoker):
    """
    Invoker running ``sls invoke local`` in a child process.
    """

    def __init__(
        self,
        command: Sequence[str] = ("sls",),
        stage: Optional[str] = None,
        cwd: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.command: List[str] = list(command)
        self.stage = stage
        self.cwd = cwd
        self.timeout = timeout

    def build_args(self, function_name: str, payload: Dict[str, Any]) -> List[str]:
        args = [*self.command, "invoke", "local", "--function", function_name, "--data", json.dumps(payload)]
        if self.stage:
            args += ["--stage", self.stage]
        return args

    async def invoke(self, function_name: str, payload: Dict[str, Any]) -> bytes:
        args = self.build_args(function_name, payload)
        logger.debug("Running %s", args)

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=self.cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise InvocationError(function_name, f"Could not start {args[0]}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise InvocationError(function_name, f"Timed out after {self.timeout} seconds")

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip() or f"exit status {process.returncode}"
            raise InvocationError(function_name, message, details={"returncode": process.returncode, "stdout": stdout})
        return stdout
