"""Header storage shared by request and response sides of a transport."""

from __future__ import annotations

from typing import Dict

from requests.structures import CaseInsensitiveDict


class HeaderStore(CaseInsensitiveDict):
    """Case-insensitive, insertion-ordered header mapping.

    Lookups ignore case and the last value written for a name wins. Iteration
    yields names with the casing they were last written with.
    """

    def normalized(self) -> Dict[str, str]:
        return dict(self.lower_items())

    def serialize(self) -> str:
        """Render the headers the way ``getAllResponseHeaders`` reports them."""
        return "".join(f"{name}: {value}\r\n" for name, value in self.lower_items())

    def __repr__(self) -> str:
        return f"HeaderStore({self.normalized()!r})"


__all__ = ["HeaderStore"]
