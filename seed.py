"""Demo products loaded into a fresh catalog."""

from store import CatalogStore

DEMO_PRODUCTS = [
    {"name": "ASUS ROG Laptop", "category": "Laptops", "description": "Gaming laptop, RTX 3060, 16GB RAM, 512GB SSD", "price": 89990, "stock": 5, "rating": 4.8},
    {"name": "iPhone 14", "category": "Smartphones", "description": '6.1" Super Retina XDR, A15 Bionic, 128GB', "price": 79990, "stock": 8, "rating": 4.9},
    {"name": "Sony WH-1000XM4", "category": "Audio", "description": "Wireless noise-cancelling headphones", "price": 24990, "stock": 12, "rating": 4.7},
    {"name": "Samsung Odyssey Monitor", "category": "Monitors", "description": '27" 240Hz, 1ms, curved QLED', "price": 45990, "stock": 3, "rating": 4.6},
    {"name": "Logitech G Pro Keyboard", "category": "Peripherals", "description": "Mechanical, hot-swap, RGB", "price": 12990, "stock": 15, "rating": 4.5},
    {"name": "Razer DeathAdder V2", "category": "Peripherals", "description": "Optical mouse, 20000 DPI, RGB", "price": 4990, "stock": 20, "rating": 4.4},
    {"name": "iPad Air", "category": "Tablets", "description": '10.9" Liquid Retina, M1, 64GB', "price": 54990, "stock": 4, "rating": 4.8},
    {"name": "Galaxy Watch 6", "category": "Accessories", "description": "44mm, GPS, NFC, heart rate monitor", "price": 29990, "stock": 7, "rating": 4.6},
    {"name": "Samsung SSD 1TB", "category": "Components", "description": "NVMe M.2, 3500MB/s read", "price": 8990, "stock": 11, "rating": 4.9},
    {"name": "Logitech C920 Webcam", "category": "Peripherals", "description": "Full HD 1080p, autofocus", "price": 6990, "stock": 6, "rating": 4.3},
]


def seed_catalog(store: CatalogStore) -> int:
    for fields in DEMO_PRODUCTS:
        store.create(fields)
    return len(DEMO_PRODUCTS)
