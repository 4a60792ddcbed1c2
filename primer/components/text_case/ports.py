from typing import Protocol


class TextCaseRulesPort(Protocol):
    def get_default_upper(self) -> bool: ...
