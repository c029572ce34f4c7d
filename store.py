"""In-memory product catalog.

The store is the only owner of product records. Every operation runs under
one lock so that concurrent requests observe mutations in the order they
were accepted, and callers only ever get copies of the stored records.
"""

import math
import re
import secrets
import string
import threading
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from schemas import Product

ID_ALPHABET = string.ascii_letters + string.digits + "_-"
ID_LENGTH = 6

STRING_FIELDS = ("name", "category", "description")
NUMERIC_FIELDS = ("price", "stock", "rating")

REQUIRED_MESSAGE = "Name, category and description are required"
NOT_FOUND_MESSAGE = "Product not found"
NOTHING_TO_UPDATE_MESSAGE = "Nothing to update"

# Plain ASCII decimal notation, optionally with an exponent.
NUMERIC_STRING = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class CatalogError(Exception):
    """Base class for errors signalled by the catalog store."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProductNotFound(CatalogError):
    """No product has the requested id."""

    def __init__(self, product_id: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.product_id = product_id


class ProductValidationError(CatalogError):
    """A create or update payload was rejected."""


def _to_number(value: Any) -> Optional[Union[int, float]]:
    """Convert a JSON value to a finite number, or None if it isn't one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not NUMERIC_STRING.fullmatch(value.strip()):
            return None
        value = float(value.strip())
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
    return value


def _coerce(field_name: str, value: Any) -> Optional[Union[int, float]]:
    number = _to_number(value)
    if number is None or number < 0:
        return None
    if field_name == "stock" and not isinstance(number, int):
        return None
    if field_name == "rating" and number > 5:
        return None
    return number


def _clean_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip()


class CatalogStore:

    def __init__(self) -> None:
        self._products: Dict[str, Product] = {}
        self._issued_ids: Set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def _new_id(self) -> str:
        # Caller holds the lock. Ids are never reused, even after a delete.
        while True:
            candidate = "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def _find(self, product_id: str) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def list(self) -> List[Product]:
        """Return copies of all products in insertion order."""
        with self._lock:
            return [product.model_copy() for product in self._products.values()]

    def get(self, product_id: str) -> Product:
        with self._lock:
            return self._find(product_id).model_copy()

    def create(self, fields: Mapping[str, Any]) -> Product:
        """Validate and insert a new product.

        ``name``, ``category`` and ``description`` must be non-blank strings.
        Numeric fields that are missing or invalid default to 0.
        """
        strings = {key: _clean_string(fields.get(key)) for key in STRING_FIELDS}
        if not all(strings.values()):
            raise ProductValidationError(REQUIRED_MESSAGE)

        numbers = {}
        for key in NUMERIC_FIELDS:
            value = _coerce(key, fields.get(key))
            numbers[key] = 0 if value is None else value

        with self._lock:
            product = Product(id=self._new_id(), **strings, **numbers)
            self._products[product.id] = product
            return product.model_copy()

    def update(self, product_id: str, fields: Mapping[str, Any]) -> Product:
        """Apply a partial update and return the full updated product.

        Only the fields present (and not null) are changed. Every supplied
        value is checked before anything is written, so an invalid field
        leaves the record untouched.
        """
        with self._lock:
            product = self._find(product_id)

            supplied = {
                key: value
                for key, value in fields.items()
                if key in STRING_FIELDS + NUMERIC_FIELDS and value is not None
            }
            if not supplied:
                raise ProductValidationError(NOTHING_TO_UPDATE_MESSAGE)

            changes: Dict[str, Any] = {}
            for key, value in supplied.items():
                if key in STRING_FIELDS:
                    cleaned = _clean_string(value)
                else:
                    cleaned = _coerce(key, value)
                if cleaned is None:
                    raise ProductValidationError(f"Invalid {key}")
                changes[key] = cleaned

            updated = product.model_copy(update=changes)
            self._products[product_id] = updated
            return updated.model_copy()

    def delete(self, product_id: str) -> None:
        with self._lock:
            self._find(product_id)
            del self._products[product_id]
