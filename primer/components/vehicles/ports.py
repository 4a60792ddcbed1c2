from typing import Protocol


class InfoProvider(Protocol):
    """Anything that can describe its make and year."""

    def get_info(self) -> str: ...
