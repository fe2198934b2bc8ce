import json
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Union

from offline_scheduler.domain.function import FunctionDefinition

FunctionProvider = Callable[[], Mapping[str, Union[FunctionDefinition, Dict[str, Any]]]]


def static_provider(functions: Mapping[str, Union[FunctionDefinition, Dict[str, Any]]]) -> FunctionProvider:
    """
    Provider returning a fixed mapping of functions.
    """
    def provide() -> Mapping[str, Union[FunctionDefinition, Dict[str, Any]]]:
        return functions
    return provide


def json_file_provider(path: Union[str, Path]) -> FunctionProvider:
    """
    Provider reading functions from a JSON file on every call.

    The file holds either ``{"functions": {...}}`` (as printed by ``sls print --format json``)
    or the bare function mapping.
    """
    path = Path(path)

    def provide() -> Dict[str, Dict[str, Any]]:
        with path.open(encoding="utf-8") as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        functions = document.get("functions", document)
        return functions or {}
    return provide
