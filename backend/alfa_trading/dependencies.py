"""
Service container and FastAPI dependency providers.

Each application instance owns one Services bundle (app.state.services).
Routers receive individual services through Depends(), so a different
BalanceStore can be swapped in without touching call sites.
"""

import random
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from alfa_trading.config import Settings, settings
from alfa_trading.services import (
    BalanceStore,
    InMemoryBalanceStore,
    OrderLog,
    OrderProcessor,
    PriceTable,
    SignalGenerator,
)


@dataclass
class Services:
    settings: Settings
    price_table: PriceTable
    ledger: BalanceStore
    order_log: OrderLog
    order_processor: OrderProcessor
    signal_generator: SignalGenerator


def build_services(
    app_settings: Optional[Settings] = None,
    ledger: Optional[BalanceStore] = None,
    price_table: Optional[PriceTable] = None,
    rng: Optional[random.Random] = None,
) -> Services:
    cfg = app_settings or settings
    price_table = price_table or PriceTable()
    ledger = ledger or InMemoryBalanceStore(default_balance=cfg.default_balance)
    order_log = OrderLog()
    return Services(
        settings=cfg,
        price_table=price_table,
        ledger=ledger,
        order_log=order_log,
        order_processor=OrderProcessor(price_table, ledger, order_log),
        signal_generator=SignalGenerator(price_table, rng=rng),
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.services.settings


def get_price_table(request: Request) -> PriceTable:
    return request.app.state.services.price_table


def get_ledger(request: Request) -> BalanceStore:
    return request.app.state.services.ledger


def get_order_log(request: Request) -> OrderLog:
    return request.app.state.services.order_log


def get_order_processor(request: Request) -> OrderProcessor:
    return request.app.state.services.order_processor


def get_signal_generator(request: Request) -> SignalGenerator:
    return request.app.state.services.signal_generator
