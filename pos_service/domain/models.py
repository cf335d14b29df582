# domain/models.py
import math
import re
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

DEFAULT_PRODUCT_NAME = "Untitled Product"
DEFAULT_CATEGORY = "Uncategorized"
PLACEHOLDER_IMAGE = "https://via.placeholder.com/150?text=No+Image"
DELETED_PRODUCT_NAME = "Deleted Product"

# Solo literales decimales ASCII: "1_000" o dígitos no ASCII no son números
NUMERIC_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def numeric_or_zero(value: Any):
    """
    Convierte un valor a número. Cualquier cosa no numérica (None, cadenas
    vacías o inválidas, NaN, infinito, listas, dicts) se convierte en 0.
    Los resultados enteros se devuelven como int.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not NUMERIC_TEXT.fullmatch(text):
            return 0
        number = float(text)
    else:
        return 0

    if isinstance(number, float):
        if math.isnan(number) or math.isinf(number):
            return 0
        if number.is_integer():
            return int(number)
    return number


def int_or_zero(value: Any) -> int:
    """Igual que numeric_or_zero pero truncado a entero."""
    return int(numeric_or_zero(value))


def _text_or_default(value: Any, default: str) -> str:
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


@dataclass
class Product:
    id: int
    name: str = DEFAULT_PRODUCT_NAME
    description: str = ""
    category: str = DEFAULT_CATEGORY
    price: float = 0
    quantity: int = 0
    image: str = PLACEHOLDER_IMAGE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Construye un producto normalizado a partir de datos sin validar."""
        return cls(
            id=int_or_zero(data.get("id")),
            name=_text_or_default(data.get("name"), DEFAULT_PRODUCT_NAME),
            description=_text_or_default(data.get("description"), ""),
            category=_text_or_default(data.get("category"), DEFAULT_CATEGORY),
            price=max(0, numeric_or_zero(data.get("price"))),
            quantity=max(0, int_or_zero(data.get("quantity"))),
            # Registros antiguos guardaban la imagen como imageUrl
            image=_text_or_default(data.get("image") or data.get("imageUrl"), PLACEHOLDER_IMAGE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SaleLineItem:
    product_id: int
    qty: int
    unit_price: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SaleLineItem":
        return cls(
            product_id=int_or_zero(data.get("productId")),
            qty=int_or_zero(data.get("qty")),
            unit_price=max(0, numeric_or_zero(data.get("unitPrice"))),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "qty": self.qty,
            "unitPrice": self.unit_price,
        }


@dataclass
class Sale:
    id: int
    items: List[SaleLineItem] = field(default_factory=list)
    timestamp: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sale":
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raw_items = []
        timestamp = data.get("timestamp")
        return cls(
            id=int_or_zero(data.get("id")),
            items=[SaleLineItem.from_dict(item) for item in raw_items if isinstance(item, dict)],
            timestamp=timestamp if isinstance(timestamp, str) else "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "items": [item.to_dict() for item in self.items],
            "timestamp": self.timestamp,
        }


@dataclass
class StoreDocument:
    """Estado completo persistido: productos y ventas."""
    products: List[Product] = field(default_factory=list)
    sales: List[Sale] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "StoreDocument":
        """Normaliza un documento leído del almacenamiento. Nunca lanza excepciones."""
        if not isinstance(data, dict):
            return cls()
        raw_products = data.get("products")
        raw_sales = data.get("sales")
        if not isinstance(raw_products, list):
            raw_products = []
        if not isinstance(raw_sales, list):
            raw_sales = []
        return cls(
            products=[Product.from_dict(p) for p in raw_products if isinstance(p, dict)],
            sales=[Sale.from_dict(s) for s in raw_sales if isinstance(s, dict)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "products": [p.to_dict() for p in self.products],
            "sales": [s.to_dict() for s in self.sales],
        }

    def find_product(self, product_id: int) -> Optional[Product]:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def next_product_id(self) -> int:
        if not self.products:
            return 1
        return max(p.id for p in self.products) + 1


@dataclass
class ReportEntry:
    product_id: int
    qty: int = 0
    revenue: float = 0
    name: str = DELETED_PRODUCT_NAME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "qty": self.qty,
            "revenue": self.revenue,
            "name": self.name,
        }


@dataclass
class SalesSummary:
    report: List[ReportEntry]
    total_revenue: float
    top_selling: List[ReportEntry]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "report": [entry.to_dict() for entry in self.report],
            "totalRevenue": self.total_revenue,
            "topSelling": [entry.to_dict() for entry in self.top_selling],
        }
