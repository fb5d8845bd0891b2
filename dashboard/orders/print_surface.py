from __future__ import annotations

from typing import List, Optional

import streamlit.components.v1 as components

_PRINT_SCRIPT = "<script>window.print();</script>"


class StreamlitPrintable:
    """Buffers receipt markup and renders it in an embedded frame that prints on load."""

    def __init__(self, height: int = 600) -> None:
        self.height = height
        self._parts: List[str] = []

    def write(self, markup: str) -> None:
        self._parts.append(markup)

    def print(self) -> None:
        page = "".join(self._parts)
        if "</body>" in page:
            page = page.replace("</body>", f"{_PRINT_SCRIPT}</body>", 1)
        else:
            page += _PRINT_SCRIPT
        components.html(page, height=self.height, scrolling=True)


class StreamlitPrintSurface:
    def __init__(self, height: int = 600) -> None:
        self.height = height

    def open_printable(self) -> Optional[StreamlitPrintable]:
        return StreamlitPrintable(height=self.height)
