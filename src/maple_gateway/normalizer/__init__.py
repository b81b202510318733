"""응답 정규화 모듈"""

from .rules import (
    filter_hyper_stats,
    get_rule,
    match_set_options,
    normalize,
    register,
)

__all__ = [
    "filter_hyper_stats",
    "get_rule",
    "match_set_options",
    "normalize",
    "register",
]
