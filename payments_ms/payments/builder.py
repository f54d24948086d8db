"""
Construction pure des paramètres Stripe Checkout (pas d'appel Stripe, pas d'I/O).
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Sequence

from .schemas import PaymentLineItem, PaymentSessionRequest

CHECKOUT_MODE = "payment"

# module payments_ms.payments.builder
def to_minor_units(price: Decimal) -> int:
    """
    Convertit un prix décimal en unités mineures (centimes) pour Stripe.
    - round(price * 100), arrondi au plus proche, demi vers le haut (19.995 -> 2000).
    - Calcul sur Decimal: pas d'erreur de représentation binaire sur les x.xx5.
    """
    amount = Decimal(str(price)) * 100
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def to_line_items(currency: str, items: Sequence[PaymentLineItem]) -> List[Dict[str, Any]]:
    """
    Construit les line_items Stripe à partir des articles du panier.
    - price_data: devise, nom du produit, unit_amount en centimes
    - l'ordre des articles est conservé
    """
    return [
        {
            "price_data": {
                "currency": currency,
                "product_data": {"name": item.name},
                "unit_amount": to_minor_units(item.price),
            },
            "quantity": item.quantity,
        }
        for item in items
    ]

def make_metadata(order_id: str) -> Dict[str, str]:
    """Métadonnées attachées au payment intent (corrélation avec la commande)."""
    return {"orderId": order_id}

def build_session_params(
    request: PaymentSessionRequest,
    *,
    success_url: str,
    cancel_url: str,
) -> Dict[str, Any]:
    """
    Paramètres complets de checkout.sessions.create.
    - metadata portée par payment_intent_data pour être visible sur les events charge.*
    """
    return {
        "payment_intent_data": {"metadata": make_metadata(request.order_id)},
        "line_items": to_line_items(request.currency, request.items),
        "mode": CHECKOUT_MODE,
        "success_url": success_url,
        "cancel_url": cancel_url,
    }
