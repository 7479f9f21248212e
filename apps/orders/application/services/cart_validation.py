"""
Read-time checks of cart items against the live state of their variants.
"""
from typing import Iterable, List, Optional

from apps.products.domain.value_objects import Price, ProductStatus
from ...domain.repositories.cart_repository import CartItemWithVariant
from ..dtos.cart_dto import CartValidationDTO, CartValidationIssueDTO, ValidationIssueDTO

BLOCKING_ISSUES = {'status', 'stock'}


def item_issues(entry: CartItemWithVariant) -> List[ValidationIssueDTO]:
    item, variant = entry.item, entry.variant
    issues = []

    if variant.product_status != ProductStatus.PUBLISHED.value:
        issues.append(ValidationIssueDTO(
            type='status',
            message=f"Product is not available (status: {variant.product_status})",
        ))

    if item.quantity > variant.stock_quantity:
        issues.append(ValidationIssueDTO(
            type='stock',
            message=(
                f"Insufficient stock. Only {variant.stock_quantity} items available, "
                f"but cart has {item.quantity}."
            ),
        ))

    snapshot = item.price_at_add
    current = variant.effective_price
    if snapshot > 0 and Price(snapshot).has_significant_difference(Price(current)):
        issues.append(ValidationIssueDTO(
            type='price',
            message=f"Price has changed from {snapshot} to {current}",
        ))

    return issues


def validate_cart_items(entries: Iterable[CartItemWithVariant]) -> Optional[CartValidationDTO]:
    """
    Classify cart items by their issues.

    Items with a status or stock issue are errors; items whose only issue is
    a price change are warnings. Returns None when every item is clean.
    Cart contents are never modified.
    """
    validation = CartValidationDTO()

    for entry in entries:
        issues = item_issues(entry)
        if not issues:
            continue

        report = CartValidationIssueDTO(
            item_id=entry.item.id,
            variant_id=entry.item.variant_id,
            issues=issues,
        )
        if any(issue.type in BLOCKING_ISSUES for issue in issues):
            validation.errors.append(report)
        else:
            validation.warnings.append(report)

    if not validation.warnings and not validation.errors:
        return None
    return validation
