"""A node that logs its input."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from colossus.errors import JsonParseError
from colossus.nodes.base import BaseNode, BaseNodeRunOptions

_logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    """Replace non-finite floats with None, as JSON has no form for them."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


@dataclass
class LogNode(BaseNode):
    """Logs its input as pretty-printed JSON and passes it on as output."""

    input: Any = None

    def execute(self, options: BaseNodeRunOptions) -> Any:
        """Log the input and return it; None when there is no input."""
        try:
            text = json.dumps(_jsonable(self.input), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise JsonParseError(exc) from exc
        _logger.info("%s", text)
        return self.input