"""
services/base.py

엔티티 공통 CRUD 서비스.

Member / Membership / Chip / Payment 는 모두 동일한
조회 / 추가 / 전체 교체 / 삭제 형태를 가지므로
하나의 제네릭 클래스(CrudService)로 구현하고,
엔티티별 서비스는 model 만 지정한 뒤 전용 조회 메서드를 추가한다.

주요 기능:
- get_by_id : 키로 단건 조회 (없으면 None)
- get_all   : 전체 조회 (키 오름차순)
- add       : 추가 후 DB가 부여한 키를 포함한 레코드 반환
- update    : 키가 일치하는 레코드의 모든 필드를 덮어씀 (없으면 no-op)
- delete    : 키가 일치하는 레코드 삭제 (없으면 no-op)

설계 원칙:
- HTTP / FastAPI 의존성 없음 (상태 코드 변환은 라우터에서 수행)
- 세션은 요청 단위로 주입받음
- commit 실패 시 rollback 후 예외를 그대로 전파

관련 파일:
- gym_api.services.member / membership / chip / payment
- gym_api.core.deps        : 요청 단위 서비스 생성

"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gym_api.db.base import Base


ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """키로 찾는 레코드가 없을 때 발생."""


class CrudService(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    @property
    def _pk(self):
        return self.model.__mapper__.primary_key[0]

    @property
    def _entity(self) -> str:
        return self.model.__name__

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("%s commit failed", self._entity)
            raise

    def get_by_id(self, id: int) -> ModelT | None:
        return self.db.get(self.model, id)

    def get_all(self) -> Sequence[ModelT]:
        return self.db.scalars(select(self.model).order_by(self._pk)).all()

    def add(self, data: dict[str, Any]) -> ModelT:
        # 키가 None이면 DB 자동 증가 값을 사용
        if data.get(self._pk.key) is None:
            data = {k: v for k, v in data.items() if k != self._pk.key}

        obj = self.model(**data)
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)

        logger.info("%s %s created", self._entity, getattr(obj, self._pk.key))
        return obj

    def update(self, id: int, data: dict[str, Any]) -> ModelT | None:
        obj = self.get_by_id(id)
        if obj is None:
            return None

        # 전체 교체: 키를 제외한 모든 컬럼을 요청 값으로 덮어씀
        for column in self.model.__table__.columns:
            if column.primary_key:
                continue
            setattr(obj, column.key, data.get(column.key))

        self._commit()
        self.db.refresh(obj)

        logger.info("%s %s updated", self._entity, id)
        return obj

    def delete(self, id: int) -> bool:
        obj = self.get_by_id(id)
        if obj is None:
            return False

        self.db.delete(obj)
        self._commit()

        logger.info("%s %s deleted", self._entity, id)
        return True
