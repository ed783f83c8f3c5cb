"""
酒店资源路由
前缀: /hotels
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.hotel_resource import HotelResource, ResourceResponse
from app.services.hotel_store import SqlAlchemyHotelStore
from app.services.validator import Validator

router = APIRouter(prefix="/hotels", tags=["酒店"])

_validator = Validator()


def get_hotel_resource(db: Session = Depends(get_db)) -> HotelResource:
    """依赖注入：按请求构造 HotelResource"""
    return HotelResource(SqlAlchemyHotelStore(db), _validator)


def request_fields(request: Request, payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """查询参数 + JSON body，body 优先"""
    fields: Dict[str, Any] = dict(request.query_params)
    if payload:
        fields.update(payload)
    return fields


def _respond(result: ResourceResponse) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.get("")
def list_hotels(resource: HotelResource = Depends(get_hotel_resource)):
    """获取酒店列表"""
    return _respond(resource.index())


@router.post("")
def create_hotel(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    resource: HotelResource = Depends(get_hotel_resource),
):
    """创建酒店"""
    return _respond(resource.store(request_fields(request, payload)))


@router.get("/{hotel_id}")
def get_hotel(hotel_id: str, resource: HotelResource = Depends(get_hotel_resource)):
    """获取酒店详情"""
    return _respond(resource.show(hotel_id))


@router.put("/{hotel_id}")
@router.patch("/{hotel_id}")
def update_hotel(
    hotel_id: str,
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(None),
    resource: HotelResource = Depends(get_hotel_resource),
):
    """更新酒店"""
    return _respond(resource.update(hotel_id, request_fields(request, payload)))


@router.delete("/{hotel_id}")
def delete_hotel(hotel_id: str, resource: HotelResource = Depends(get_hotel_resource)):
    """删除酒店"""
    return _respond(resource.destroy(hotel_id))
