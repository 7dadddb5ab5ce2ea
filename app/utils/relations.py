"""관계 응답 형태 정규화

조인된 관계 값은 단일 객체, 원소 1개짜리 리스트, 빈 값 중 하나로 올 수 있습니다.
데이터 접근 경계에서 항상 단일 Optional 값으로 변환해 상위 레이어로 넘깁니다.
"""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def one_or_none(value: T | Sequence[T] | None) -> T | None:
    """객체 / 단일 원소 리스트 / None 을 단일 Optional 값으로 변환

    Examples:
        >>> one_or_none(None) is None
        True
        >>> one_or_none([])
        >>> one_or_none(["a"])
        'a'
        >>> one_or_none("a")
        'a'
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value
