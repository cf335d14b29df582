# services/sales_service.py
from datetime import datetime, timezone
from typing import Any, List, Optional

from pos_service.domain.errors import ValidationError, InsufficientStockError
from pos_service.domain.models import Sale, SaleLineItem
from pos_service.logger import get_logger
from pos_service.repositories.store_repository import StoreRepository

logger = get_logger("sales")


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Fecha ISO-8601 en UTC con milisegundos y sufijo Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_items(items: Any) -> List[SaleLineItem]:
    """Valida y normaliza las líneas de una venta."""
    if not items or not isinstance(items, list):
        raise ValidationError("No items provided")

    line_items = []
    for raw in items:
        if not isinstance(raw, dict):
            raise ValidationError("Invalid sale item")
        item = SaleLineItem.from_dict(raw)
        if item.qty <= 0:
            raise ValidationError(f"Invalid quantity for product ID {item.product_id}")
        line_items.append(item)
    return line_items


class SalesService:
    def __init__(self, repository: StoreRepository, clock=None):
        self.repository = repository
        self.clock = clock or utc_timestamp

    def list_sales(self) -> List[Sale]:
        """Caso de uso: listar todas las ventas registradas."""
        with self.repository.lock:
            return self.repository.load().sales

    def record_sale(self, items: Any) -> Sale:
        """
        Caso de uso: registrar una venta y descontar el stock.

        El stock se verifica y descuenta en una sola pasada sobre el documento
        en memoria, de modo que una línea ve lo que descontaron las anteriores.
        Si alguna línea no tiene stock suficiente se lanza la excepción antes
        de guardar: el almacenamiento queda intacto.
        """
        line_items = parse_items(items)

        with self.repository.lock:
            document = self.repository.load()

            for item in line_items:
                # Sin productId, o con un producto inexistente, la línea se registra sin tocar stock
                product = document.find_product(item.product_id) if item.product_id else None
                if product is None:
                    continue
                if product.quantity < item.qty:
                    raise InsufficientStockError(item.product_id)
                product.quantity = max(0, product.quantity - item.qty)

            sale = Sale(id=len(document.sales) + 1, items=line_items, timestamp=self.clock())
            document.sales.append(sale)
            self.repository.save(document)

        logger.info("Sale recorded: id=%s items=%d", sale.id, len(sale.items))
        return sale
