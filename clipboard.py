from __future__ import annotations

import base64
import logging
from typing import Callable, Optional, Protocol

import streamlit.components.v1 as components

from catalog import Record

logger = logging.getLogger(__name__)


class ClipboardUnavailable(RuntimeError):
    """The host refused or does not offer clipboard access."""


class Clipboard(Protocol):
    def write(self, text: str) -> None: ...


def copy_text(record: Record) -> str:
    return f"{record.primary_text}\n\n{record.transliteration}\n\n{record.translation}"


def copy_record(record: Record, clipboard: Clipboard) -> bool:
    """Write the record to the clipboard. Returns False instead of raising."""
    try:
        clipboard.write(copy_text(record))
    except ClipboardUnavailable as exc:
        logger.warning("Copy of record %d failed: %s", record.id, exc)
        return False
    logger.debug("Copied record %d", record.id)
    return True


# -----------------------------
# BROWSER CLIPBOARD (Streamlit)
# -----------------------------
COPY_SCRIPT = """
<div id="copyMsg" style="font-family: sans-serif; font-size: 13px; color: #b91c1c;"></div>
<script>
(async function() {{
  const msg = document.getElementById("copyMsg");
  try {{
    const bytes = Uint8Array.from(atob("{b64}"), c => c.charCodeAt(0));
    await navigator.clipboard.writeText(new TextDecoder("utf-8").decode(bytes));
  }} catch(e) {{
    msg.textContent = "{blocked}";
  }}
}})();
</script>
"""

BLOCKED_MESSAGE = "Salinan disekat pelayar"


class BrowserClipboard:
    """Copies through ``navigator.clipboard`` in the user's browser.

    The write runs client-side after the rerun completes, so a browser refusal
    can only be shown inline in the injected frame, not reported back here.
    """

    def __init__(self, enabled: bool = True, render: Optional[Callable[..., object]] = None):
        self.enabled = enabled
        self._render = render or components.html

    def write(self, text: str) -> None:
        if not self.enabled:
            raise ClipboardUnavailable("clipboard access is disabled")
        b64 = base64.b64encode(text.encode("utf-8")).decode("ascii")
        self._render(COPY_SCRIPT.format(b64=b64, blocked=BLOCKED_MESSAGE), height=24)
