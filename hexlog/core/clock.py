"""
Timestamp text for the date region.
"""

import arrow


def current_timestamp(pattern: str) -> str:
    """
    Format the current local time with a moment-style ``pattern``.

    Parameters
    ----------
    pattern : str
        Token pattern such as ``"D MMM YYYY HH:mm:ss"``; text inside square
        brackets is emitted literally.

    Returns
    -------
    str
        Formatted timestamp.
    """
    return arrow.now().format(pattern)
