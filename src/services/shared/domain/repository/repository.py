from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
D = TypeVar("D")


class Repository(ABC, Generic[T, D]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - ID と作成日時の採番はリポジトリが行う
    """

    @abstractmethod
    def create(self, draft: D) -> T:
        """下書きから集約を生成し、永続化する"""
        raise NotImplementedError
