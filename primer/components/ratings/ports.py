from typing import Protocol


class RatingsRulesPort(Protocol):
    def get_min_rating(self) -> float: ...
