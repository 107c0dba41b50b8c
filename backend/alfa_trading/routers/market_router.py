"""Market data routes"""

import logging

from fastapi import APIRouter, Depends

from alfa_trading.dependencies import get_price_table
from alfa_trading.exceptions import AppError, InternalError
from alfa_trading.responses import success, utc_timestamp
from alfa_trading.services import PriceTable

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/market", tags=["market"])


@router.get("/prices")
async def get_market_prices(price_table: PriceTable = Depends(get_price_table)):
    """Static symbol -> reference price table"""
    try:
        return success(price_table.list_all(), timestamp=utc_timestamp())
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error fetching market prices: {e}")
        raise InternalError("Failed to fetch market prices", details=str(e))
