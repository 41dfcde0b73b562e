"""Schema loading utility."""

import json
from pathlib import Path

MOVE_REQUEST_SCHEMA = Path(__file__).parent / "move_request.json"


def load_schema(path: Path = MOVE_REQUEST_SCHEMA) -> dict:
    """Load a JSON Schema file and return as dict."""
    with open(path) as f:
        return json.load(f)
