"""Trading signal routes"""

import logging

from fastapi import APIRouter, Depends

from alfa_trading.dependencies import get_signal_generator
from alfa_trading.exceptions import AppError, InternalError
from alfa_trading.responses import success
from alfa_trading.services import SignalGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/signal", tags=["signal"])


@router.get("/entry")
async def get_entry_signal(generator: SignalGenerator = Depends(get_signal_generator)):
    """Fresh randomized entry signal with target and stop-loss levels"""
    try:
        signal = generator.generate_signal()
        return success(signal.to_api())
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Error generating signal: {e}")
        raise InternalError("Failed to generate signal", details=str(e))
