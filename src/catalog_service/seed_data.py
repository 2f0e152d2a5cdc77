"""Sample records loaded at startup when SEED_DATA is enabled."""

import logging
from collections.abc import Iterable
from typing import Any

from catalog_service.services import ResourceService

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: tuple[dict[str, Any], ...] = (
    {"name": "Ноутбук ASUS ROG", "category": "Ноутбуки", "description": "Игровой ноутбук с RTX 3060", "price": 95000, "stock": 5},
    {"name": "Смартфон iPhone 15", "category": "Смартфоны", "description": "128GB, черный", "price": 89000, "stock": 8},
    {"name": "Наушники Sony WH-1000XM5", "category": "Аксессуары", "description": "Беспроводные, шумоподавление", "price": 25000, "stock": 12},
    {"name": 'Монитор Samsung 27"', "category": "Мониторы", "description": "4K, IPS, 144Hz", "price": 32000, "stock": 3},
    {"name": "Клавиатура Logitech MX Keys", "category": "Аксессуары", "description": "Беспроводная, подсветка", "price": 9000, "stock": 15},
    {"name": "Мышь Razer DeathAdder V3", "category": "Аксессуары", "description": "Проводная, 30000 DPI", "price": 6000, "stock": 20},
    {"name": "Планшет iPad Air", "category": "Планшеты", "description": "64GB, Wi-Fi", "price": 45000, "stock": 7},
    {"name": "SSD Samsung 1TB", "category": "Комплектующие", "description": "NVMe M.2", "price": 8000, "stock": 25},
    {"name": "Видеокарта RTX 4070", "category": "Комплектующие", "description": "12GB, GDDR6", "price": 65000, "stock": 2},
    {"name": "Принтер HP LaserJet", "category": "Оргтехника", "description": "Черно-белый, лазерный", "price": 15000, "stock": 4},
)

SAMPLE_USERS: tuple[dict[str, Any], ...] = (
    {"name": "Петр", "age": 16},
    {"name": "Иван", "age": 18},
    {"name": "Дарья", "age": 20},
)

SAMPLES: dict[str, tuple[dict[str, Any], ...]] = {
    "products": SAMPLE_PRODUCTS,
    "users": SAMPLE_USERS,
}


def seed(service: ResourceService, rows: Iterable[dict[str, Any]]) -> int:
    """Create each row through the normal create path.

    Returns:
        Number of records created
    """
    count = 0
    for row in rows:
        service.create_record(row)
        count += 1
    logger.info("Seeded %d %s", count, service.schema.collection)
    return count
