"""
Funds Router

Paper account balance for the caller (guest user when anonymous):
- View balance
- Reset balance to the configured default
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from alfa_trading.auth.identity import get_user_id
from alfa_trading.config import Settings
from alfa_trading.dependencies import get_ledger, get_settings
from alfa_trading.exceptions import AppError, InternalError
from alfa_trading.responses import success
from alfa_trading.schemas import BalanceResponse
from alfa_trading.services import BalanceStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/funds", tags=["funds"])


@router.get("/balance")
async def get_balance(
    user_id: str = Depends(get_user_id),
    ledger: BalanceStore = Depends(get_ledger),
    app_settings: Settings = Depends(get_settings),
):
    """
    Get the paper account balance for the current user.

    There is no margin model: available, total and available margin all
    report the same figure and used margin is always 0.
    """
    try:
        amount = await ledger.get_balance(user_id)
        balance = BalanceResponse.from_amount(amount, app_settings.currency, datetime.now(timezone.utc))
        return success(balance.to_api())
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error fetching balance for {user_id}: {e}")
        raise InternalError("Failed to fetch balance", details=str(e))


@router.post("/reset")
async def reset_balance(
    user_id: str = Depends(get_user_id),
    ledger: BalanceStore = Depends(get_ledger),
    app_settings: Settings = Depends(get_settings),
):
    """
    Reset the paper account balance to the default amount.

    Executed orders stay in the order log.
    """
    try:
        amount = await ledger.set_balance(user_id, app_settings.default_balance)
        logger.info(f"Paper balance reset: user_id={user_id}, balance={amount}")
        balance = BalanceResponse.from_amount(amount, app_settings.currency, datetime.now(timezone.utc))
        return success(balance.to_api(), message="Paper balance reset to default")
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error resetting balance for {user_id}: {e}")
        raise InternalError("Failed to reset balance", details=str(e))
