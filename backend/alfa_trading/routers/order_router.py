"""
Paper Order Router

- Place a paper order (fills immediately)
- List the caller's executed orders
- Fetch a single order
"""

import logging

from fastapi import APIRouter, Depends

from alfa_trading.auth.identity import get_user_id
from alfa_trading.dependencies import get_order_log, get_order_processor
from alfa_trading.exceptions import AppError, InternalError, NotFoundError
from alfa_trading.responses import success
from alfa_trading.schemas import OrderRequest
from alfa_trading.services import OrderLog, OrderProcessor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/order", tags=["order"])


@router.post("/paper")
async def place_paper_order(
    request: OrderRequest,
    user_id: str = Depends(get_user_id),
    processor: OrderProcessor = Depends(get_order_processor),
):
    """
    Place a paper order.

    Body: {symbol, type: BUY|SELL, quantity, price?}. Without a positive
    price the order executes at the reference price for the symbol.
    """
    try:
        order = await processor.place_order(
            user_id=user_id,
            symbol=request.symbol,
            side=request.type,
            quantity=request.quantity,
            price=request.price,
        )
        return success(order.to_api(), message="Paper order placed successfully")
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error placing paper order for {user_id}: {e}")
        raise InternalError("Order placement failed", details=str(e))


@router.get("/history")
async def get_order_history(
    user_id: str = Depends(get_user_id),
    order_log: OrderLog = Depends(get_order_log),
):
    """Executed paper orders for the current user, oldest first"""
    try:
        orders = await order_log.list_for_user(user_id)
        return success([o.to_api() for o in orders])
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error fetching order history for {user_id}: {e}")
        raise InternalError("Failed to fetch order history", details=str(e))


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    user_id: str = Depends(get_user_id),
    order_log: OrderLog = Depends(get_order_log),
):
    try:
        order = await order_log.get(order_id)
        # Other users' orders are reported as missing
        if order is None or order.user_id != user_id:
            raise NotFoundError("Order not found")
        return success(order.to_api())
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {e}")
        raise InternalError("Failed to fetch order", details=str(e))
