"""
Build a listing of the app's registered routes with example commands.

Each entry points at the view function's source line and carries ready to
paste curl / PowerShell examples.
"""
import inspect
import os
import re
from typing import Any, Dict, List, Optional, Tuple

from configs.config import EXAMPLE_BASE_URL, EXAMPLE_PATH_VALUES, FILTER_EXAMPLE_QUERY

FILTER_PATH = "/api/vessels/filter"
IGNORED_METHODS = {"HEAD", "OPTIONS"}
_RULE_ARG = re.compile(r"<(?:[^:<>]+:)?([^<>]+)>")


def _demo_path(path: str) -> str:
    return _RULE_ARG.sub(lambda m: EXAMPLE_PATH_VALUES.get(m.group(1), m.group(1).upper()), path)


def build_examples(method: str, path: str, base_url: str = EXAMPLE_BASE_URL) -> Dict[str, str]:
    if path.startswith(FILTER_PATH):
        url = f"{base_url}{path}{FILTER_EXAMPLE_QUERY}"
    else:
        url = f"{base_url}{_demo_path(path)}"

    if method == "GET":
        return {"exampleCurl": f'curl "{url}"', "examplePS": f'Invoke-RestMethod "{url}"'}
    return {
        "exampleCurl": f'curl -X {method} "{url}"',
        "examplePS": f'Invoke-RestMethod -Method {method} "{url}"',
    }


def _view_source(view_func) -> Tuple[str, Optional[int]]:
    """('file:line', line) of the view function, or ('unknown', None)."""
    if view_func is None:
        return "unknown", None
    func = inspect.unwrap(view_func)
    try:
        filename = os.path.basename(inspect.getsourcefile(func) or "")
        _, line = inspect.getsourcelines(func)
    except (OSError, TypeError):
        return "unknown", None
    return f"{filename}:{line}", line


def list_routes(app, base_url: str = EXAMPLE_BASE_URL) -> List[Dict[str, Any]]:
    """List (method, path) pairs for every rule except static files, sorted by path then method."""
    seen = {}
    for rule in app.url_map.iter_rules():
        if rule.endpoint == "static":
            continue
        source, line = _view_source(app.view_functions.get(rule.endpoint))
        for method in sorted((rule.methods or set()) - IGNORED_METHODS):
            key = (rule.rule, method)
            if key in seen:
                continue
            seen[key] = {
                "method": method,
                "path": rule.rule,
                "source": source,
                "line": line,
                **build_examples(method, rule.rule, base_url),
            }
    return [seen[key] for key in sorted(seen)]
