# services/report_service.py
from typing import Dict, Iterable, List

from pos_service.domain.models import DELETED_PRODUCT_NAME, ReportEntry, Sale, SalesSummary
from pos_service.repositories.store_repository import StoreRepository

TOP_SELLING_LIMIT = 5


def group_by_product(sales: Iterable[Sale]) -> List[ReportEntry]:
    """
    Agrupa las líneas de todas las ventas por producto acumulando cantidad e
    ingresos con el precio unitario guardado en la venta. Las líneas con
    productId, qty o unitPrice en cero se ignoran.
    """
    groups: Dict[int, ReportEntry] = {}
    for sale in sales:
        for item in sale.items:
            if not item.product_id or not item.qty or not item.unit_price:
                continue
            entry = groups.setdefault(item.product_id, ReportEntry(product_id=item.product_id))
            entry.qty += item.qty
            entry.revenue += item.qty * item.unit_price

    return [groups[product_id] for product_id in sorted(groups)]


class ReportService:
    def __init__(self, repository: StoreRepository):
        self.repository = repository

    def summary(self) -> SalesSummary:
        """Caso de uso: resumen de ingresos por producto y los más vendidos."""
        with self.repository.lock:
            document = self.repository.load()
        report = group_by_product(document.sales)

        for entry in report:
            product = document.find_product(entry.product_id)
            entry.name = product.name if product else DELETED_PRODUCT_NAME

        total_revenue = sum(entry.revenue for entry in report)
        # sorted() es estable: los empates conservan el orden del reporte
        top_selling = sorted(report, key=lambda e: e.qty, reverse=True)[:TOP_SELLING_LIMIT]

        return SalesSummary(report=report, total_revenue=total_revenue, top_selling=top_selling)
