# backend/supplier_api/core/api.py
from __future__ import annotations
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


# Tüm JSON cevaplarda UTF-8 charset
class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


def envelope(data: Any, message: str) -> dict:
    return {"data": jsonable_encoder(data), "message": message}


def ok(data: Any = None, message: str = "ok", status_code: int = 200):
    return UTF8JSONResponse(content=envelope(data, message), status_code=status_code)


def fail(message: str, status_code: int = 400):
    return UTF8JSONResponse(content=envelope(None, message), status_code=status_code)
