"""Paper trading services: prices, ledger, order log, order processing and signals"""

from .ledger import BalanceStore, InMemoryBalanceStore
from .order_log import OrderLog
from .order_processor import OrderProcessor
from .price_table import PriceTable
from .signal_generator import SignalGenerator

__all__ = [
    "BalanceStore",
    "InMemoryBalanceStore",
    "OrderLog",
    "OrderProcessor",
    "PriceTable",
    "SignalGenerator",
]
