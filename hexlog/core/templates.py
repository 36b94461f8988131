"""
Placeholder substitution for log line templates.
"""

import re
from typing import Mapping, Optional

DEFAULT_TEMPLATE = "{level} | {date} | {message}"

_PLACEHOLDER = re.compile(r"\{(level|date|message)\}")


def resolve_template(template: str, params: Mapping[str, Optional[str]]) -> str:
    """
    Substitute ``{level}``, ``{date}`` and ``{message}`` in ``template``.

    Parameters
    ----------
    template : str
        Template text. Placeholders may repeat; unknown ones are kept as-is.
    params : Mapping[str, Optional[str]]
        Values keyed by ``level``, ``date`` and ``message``. Missing keys and
        ``None`` values are substituted with an empty string.

    Returns
    -------
    str
        The resolved text. Substituted values are never re-scanned.
    """
    def _value(match: "re.Match[str]") -> str:
        value = params.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_value, template)
