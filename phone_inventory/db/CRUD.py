from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import func, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from phone_inventory.common.Schemas.phone_schemas import PhoneOut
from phone_inventory.common.errors import PhoneNotFound, StoreError
from phone_inventory.common.logger import logger
from phone_inventory.db.database import Base
from phone_inventory.db.Models.phone_models import FILLABLE, Phone

PER_PAGE = 3
MAX_ID = 2 ** 63 - 1  # BIGINT / SQLite INTEGER

# ---------- служебные операции ----------

def create_db(engine: Engine) -> str:
    Base.metadata.create_all(bind=engine)
    return "Database created successfully"

def drop_db(engine: Engine) -> str:
    Base.metadata.drop_all(bind=engine)
    return "Database dropped successfully"

def db_status(db: Session) -> str:
    db.scalar(text("SELECT 1"))
    return "ok"

# ---------- пагинация ----------

@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int
    total_items: int
    per_page: int

def parse_page(raw: Any) -> int:
    """
    ?page=N -> N. Мусор и значения < 1 считаются первой страницей.
    """
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1

def list_phones(db: Session, page: Any = 1, per_page: int = PER_PAGE) -> Tuple[List[Phone], PageInfo]:
    page = parse_page(page)
    total = db.scalar(select(func.count()).select_from(Phone)) or 0
    info = PageInfo(
        current_page=page,
        total_pages=max(math.ceil(total / per_page), 1),
        total_items=total,
        per_page=per_page,
    )
    # за последней страницей ничего нет, OFFSET не считаем
    if page > info.total_pages:
        items: List[Phone] = []
    else:
        items = list(db.scalars(
            select(Phone).order_by(Phone.id).offset((page - 1) * per_page).limit(per_page)
        ).all())
    logger.debug("list_phones: page=%s, items=%s, total=%s", page, len(items), total)
    return items, info

# ---------- CRUD ----------

def _fillable(fields: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k in FILLABLE}

def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("%s failed - %s", action, e)
        raise StoreError(str(e)) from e

def create_phone(db: Session, fields: Mapping[str, Any]) -> Phone:
    phone = Phone(**_fillable(fields))
    db.add(phone)
    _commit(db, "create_phone")
    db.refresh(phone)
    logger.info("create_phone: id=%s", phone.id)
    return phone

def find_phone(db: Session, phone_id: int) -> Optional[Phone]:
    if not 0 < phone_id <= MAX_ID:
        return None
    return db.get(Phone, phone_id)

def get_phone(db: Session, phone_id: int) -> Phone:
    phone = find_phone(db, phone_id)
    if phone is None:
        raise PhoneNotFound(phone_id)
    return phone

def update_phone(db: Session, phone_id: int, fields: Mapping[str, Any]) -> Phone:
    """
    Частичное обновление: меняются только переданные поля, без валидации.
    Запись, которую потом нельзя прочитать как PhoneOut, не коммитится.
    """
    phone = get_phone(db, phone_id)
    values = _fillable(fields)
    try:
        for key, value in values.items():
            setattr(phone, key, value)
        db.flush()
        db.refresh(phone)
        PhoneOut.model_validate(phone)
    except (SQLAlchemyError, ValueError, TypeError, OverflowError) as e:
        db.rollback()
        logger.error("update_phone failed id=%s - %s", phone_id, e)
        raise StoreError(str(e)) from e
    _commit(db, "update_phone")
    db.refresh(phone)
    logger.info("update_phone: id=%s, fields=%s", phone.id, sorted(values))
    return phone

def delete_phone(db: Session, phone_id: int) -> None:
    phone = get_phone(db, phone_id)
    db.delete(phone)
    _commit(db, "delete_phone")
    logger.info("delete_phone: id=%s", phone_id)
