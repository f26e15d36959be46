"""
카테고리 레지스트리 - 구독 가능한 카테고리 목록
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, List, Tuple

from ...config import settings


@dataclass(frozen=True)
class CategoryRegistry:
    """불변 카테고리 목록 (시작 시 한 번 생성되어 주입됨)"""

    categories: Tuple[str, ...]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "CategoryRegistry":
        """중복 제거, 순서 유지"""
        seen = []
        for name in names:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return cls(categories=tuple(seen))

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and category in self.categories

    def __iter__(self) -> Iterator[str]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def names(self) -> List[str]:
        """카테고리 이름 목록"""
        return list(self.categories)


@lru_cache()
def get_registry() -> CategoryRegistry:
    """설정 기반 레지스트리 반환"""
    return CategoryRegistry.from_names(settings.categories)
