"""Application services: demo data seeding.

Both seeders are no-ops when their store already holds data.  The order
seeder goes through the regular CreateOrderHandler, so seeded orders are
validated against inventory like any other order; an order that cannot be
placed is logged and skipped.
"""

from __future__ import annotations

import logging
import random
import uuid

from ordersvc.application.create_order import CreateOrderHandler
from ordersvc.application.dto import OrderItemSpec
from ordersvc.domain.exceptions import (
    InsufficientStockError,
    InventoryUnavailableError,
    ProductNotFoundError,
)
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.port.inventory_lookup import InventoryLookup
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# name, description, price, quantity
DEMO_PRODUCTS = [
    ("Laptop Pro", "High-end workstation", "1500.00", 10),
    ("Wireless Mouse", "Ergonomic 2.4GHz", "25.00", 50),
    ("Mechanical Keyboard", "RGB Backlit Blue Switches", "80.00", 30),
    ("Monitor 4K", "27-inch IPS Panel", "400.00", 15),
    ("USB-C Hub", "7-in-1 Multiport Adapter", "45.00", 100),
    ("Webcam HD", "1080p with Microphone", "60.00", 25),
    ("Gaming Headset", "7.1 Surround Sound", "90.00", 20),
    ("External SSD", "1TB NVMe Portable", "120.00", 40),
    ("Smartphone Stand", "Adjustable Aluminum Holder", "15.00", 200),
    ("Desk Mat", "Large Waterproof Leather", "20.00", 60),
]


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Insert the demo catalog into an empty store; return how many were added."""
        if self._product_repo.list_all():
            logger.info("Catalog already contains data. Skipping seeding.")
            return 0

        for index, (name, description, price, quantity) in enumerate(DEMO_PRODUCTS, 1):
            self._product_repo.save(
                Product.create(
                    product_id=str(index),
                    name=name,
                    price=Money.of(price),
                    quantity=quantity,
                    description=description,
                )
            )
        logger.info("Seeded %d products.", len(DEMO_PRODUCTS))
        return len(DEMO_PRODUCTS)


class SeedOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        inventory: InventoryLookup,
        rng: random.Random | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._inventory = inventory
        self._rng = rng or random.Random()

    def handle(self, count: int = 10) -> int:
        """Place up to *count* random orders; return how many were created."""
        if self._order_repo.find_all():
            logger.info("Orders already exist. Skipping seeding.")
            return 0

        try:
            products = self._inventory.list_products()
        except InventoryUnavailableError as exc:
            logger.error("Failed to seed orders: %s", exc)
            return 0

        if not products:
            logger.warning("No products found in inventory. Skipping order seeding.")
            return 0

        create = CreateOrderHandler(self._order_repo, self._inventory)
        created = 0
        for _ in range(count):
            specs = [
                OrderItemSpec(
                    product_id=self._rng.choice(products).product_id,
                    quantity=self._rng.randint(1, 3),
                )
                for _ in range(self._rng.randint(1, 5))
            ]
            user_id = f"seed-user-{uuid.uuid4().hex[:8]}"
            try:
                create.handle(user_id, specs)
            except (
                InventoryUnavailableError,
                InsufficientStockError,
                ProductNotFoundError,
            ) as exc:
                logger.warning("Skipping seed order for %s: %s", user_id, exc)
                continue
            created += 1

        logger.info("Seeded %d of %d orders.", created, count)
        return created
