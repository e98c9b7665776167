"""
Order endpoints.

Same contract as the user endpoints, except that creating an order
first asks the user service whether ``user_id`` exists.  Both an unknown
user and an unreachable user service are reported as ``400``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.errors import UnknownUserError, UserServiceUnavailable
from ...schemas.order import Order, OrderCreate, OrderUpdate
from ...services.order_service import OrderService
from ..deps import get_order_service, json_body

router = APIRouter()

ORDER_NOT_FOUND = "Order not found"


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
def create_order(
    order_in: OrderCreate = Depends(json_body(OrderCreate)),
    service: OrderService = Depends(get_order_service),
) -> Order:
    """Create an order for an existing user.

    Like users, an order posted with an existing id replaces the stored
    one.
    """
    if not order_in.id or not order_in.user_id or not order_in.product:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ID, User ID, and Product are required",
        )
    try:
        return service.create_order(order_in)
    except UnknownUserError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User does not exist")
    except UserServiceUnavailable as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User service unavailable: {exc}",
        )


@router.get("", response_model=List[Order])
def list_orders(service: OrderService = Depends(get_order_service)) -> List[Order]:
    return service.list_orders()


@router.get("/{order_id}", response_model=Order)
def get_order(order_id: str, service: OrderService = Depends(get_order_service)) -> Order:
    order = service.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ORDER_NOT_FOUND)
    return order


@router.put("/{order_id}", response_model=Order)
def update_order(
    order_id: str,
    order_in: OrderUpdate = Depends(json_body(OrderUpdate)),
    service: OrderService = Depends(get_order_service),
) -> Order:
    """Replace every field of an existing order.

    The referenced user is not checked again.
    """
    order = service.update_order(order_id, order_in)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ORDER_NOT_FOUND)
    return order


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: str, service: OrderService = Depends(get_order_service)) -> None:
    if not service.delete_order(order_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ORDER_NOT_FOUND)
    return None
