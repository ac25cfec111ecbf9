import logging
from typing import Callable, Optional

import pyperclip

logger = logging.getLogger(__name__)

CopySink = Callable[[str], None]


def copy_to_clipboard(value: Optional[str], sink: Optional[CopySink] = None) -> bool:
    """
    Copy text to the clipboard (or to ``sink`` when given).

    Returns False instead of raising when there is nothing to copy or the
    sink fails, e.g. no clipboard mechanism on a headless machine.
    """
    if not value:
        return False

    sink = sink or pyperclip.copy
    try:
        sink(value)
        return True
    except Exception as e:
        logger.error("Failed to copy to clipboard - %s", e)
        return False
