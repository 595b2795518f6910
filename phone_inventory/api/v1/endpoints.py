from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette import status
from starlette.requests import Request

from phone_inventory.common.Schemas.phone_schemas import PhoneCreate, PhoneOut, validation_errors
from phone_inventory.common.errors import PhoneNotFound
from phone_inventory.common.logger import logger
from phone_inventory.db.CRUD import (
    create_phone,
    db_status,
    delete_phone,
    get_phone,
    list_phones,
    update_phone,
)
from phone_inventory.db.Models.phone_models import Phone
from phone_inventory.db.database import get_db

router: APIRouter = APIRouter()

# ---------------- helpers ---------------- #

def _dump(phone: Phone) -> Dict[str, Any]:
    return PhoneOut.model_validate(phone).model_dump(mode="json")


def _failure(e: Exception, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": False, "message": str(e), **extra},
    )


async def _read_body(request: Request) -> Dict[str, Any]:
    """Тело запроса как dict; не-JSON и не-объект -> {}."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _resolve_phone(db: Session, phone_id: str) -> Phone:
    """
    Явный поиск записи до тела обработчика. Нет записи -> голый 404.
    """
    try:
        return get_phone(db, int(phone_id))
    except (ValueError, PhoneNotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

# ---------------- Phones ---------------- #

@router.get("/phones", tags=["Phones"])
async def index(
    page: Optional[str] = None,
    db: Session = Depends(get_db),
) -> Any:
    try:
        items, info = list_phones(db, page)
        return {
            "data": [_dump(p) for p in items],
            "current_page": info.current_page,
            "total_pages": info.total_pages,
            "total_items": info.total_items,
            "per_page": info.per_page,
        }
    except Exception as e:
        logger.error("Error listing phones - %s", e, exc_info=True)
        return _failure(e)


@router.post("/phones", tags=["Phones"])
async def store(
    request: Request,
    db: Session = Depends(get_db),
) -> Any:
    try:
        body = await _read_body(request)
        try:
            payload = PhoneCreate.model_validate(body)
        except ValidationError as exc:
            return JSONResponse(
                status_code=request.app.state.settings.VALIDATION_STATUS_CODE,
                content={
                    "status": False,
                    "message": "validation error",
                    "errors": validation_errors(exc),
                },
            )

        phone = create_phone(db, payload.model_dump())
        return {
            "status": True,
            "message": "phone Created Successfully",
            "phone": _dump(phone),
        }
    except Exception as e:
        logger.error("Error creating phone - %s", e, exc_info=True)
        return _failure(e)


@router.get("/phones/{phone_id}", tags=["Phones"])
async def show(
    phone_id: str,
    db: Session = Depends(get_db),
) -> Any:
    phone = _resolve_phone(db, phone_id)
    try:
        return {"status": True, "message": "phone Existes", "phone": _dump(phone)}
    except Exception as e:
        logger.error("Error showing phone %s - %s", phone_id, e, exc_info=True)
        return _failure(e, error=e.__class__.__name__)


@router.api_route("/phones/{phone_id}", methods=["PUT", "PATCH"], tags=["Phones"])
async def update(
    phone_id: str,
    request: Request,
    db: Session = Depends(get_db),
) -> Any:
    """
    Поля из тела применяются как есть, без валидации (в отличие от POST).
    """
    phone = _resolve_phone(db, phone_id)
    try:
        body = await _read_body(request)
        phone = update_phone(db, phone.id, body)
        return {
            "status": True,
            "message": "phone updated successfully",
            "phone": _dump(phone),
        }
    except Exception as e:
        logger.error("Error updating phone %s - %s", phone_id, e, exc_info=True)
        return _failure(e)


@router.delete("/phones/{phone_id}", tags=["Phones"])
async def destroy(
    phone_id: str,
    request: Request,
    db: Session = Depends(get_db),
) -> Any:
    phone = _resolve_phone(db, phone_id)
    try:
        delete_phone(db, phone.id)
        # тело отдаётся и при 204
        return JSONResponse(
            status_code=request.app.state.settings.DELETE_STATUS_CODE,
            content={"status": True, "message": "phone deleted successfully"},
        )
    except Exception as e:
        logger.error("Error deleting phone %s - %s", phone_id, e, exc_info=True)
        return _failure(e)

# ---------------- DB utils ---------------- #

@router.get("/status_DB", tags=["database"])
async def get_db_status(
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """
    Проверка соединения с БД. Полезно для health-check.
    """
    try:
        return {"status": status.HTTP_200_OK, "DB_status": db_status(db)}
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error connecting to DB: {e}",
        )
