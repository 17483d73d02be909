"""Name templates for parameterized groups and tests."""

from __future__ import annotations

import re
from typing import Any

# printf-style conversion, e.g. %s, %d, %-5s, %.2f
_PLACEHOLDER = re.compile(r"%[-#0 +]*\d*(?:\.\d+)?[diouxXeEfFgGcrsa]")


def instantiate(template: str, value: Any) -> str:
    """Substitute ``value`` into the single placeholder of ``template``."""
    count = len(_PLACEHOLDER.findall(template.replace("%%", "")))
    if count != 1:
        raise ValueError(
            f"Name template {template!r} must contain exactly one placeholder, "
            f"found {count}"
        )
    return template % (value,)
