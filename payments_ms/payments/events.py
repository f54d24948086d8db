"""
Dispatch des événements Stripe reçus par le webhook.
- Table fermée {type: handler}; tout type absent passe par handle_unknown.
- Purement observationnel: aucun état modifié, uniquement des logs.
"""
import logging
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

CHARGE_SUCCEEDED = "charge.succeeded"
PAYMENT_INTENT_FAILED = "payment_intent.payment_failed"
PAYMENT_INTENT_CANCELED = "payment_intent.canceled"

# module payments_ms.payments.events
def _metadata_of(event: Any) -> Any:
    try:
        return event.data.object.metadata
    except AttributeError:
        return None

def _order_id_of(metadata: Any) -> Optional[str]:
    if metadata is None:
        return None
    try:
        return metadata["orderId"]
    except (KeyError, TypeError):
        return None

def handle_charge_succeeded(event: Any) -> None:
    metadata = _metadata_of(event)
    logger.info("Payment intent succeeded")
    logger.debug("metadata=%s orderId=%s", metadata, _order_id_of(metadata))

def handle_payment_failed(event: Any) -> None:
    logger.warning("Payment intent payment failed")

def handle_payment_canceled(event: Any) -> None:
    logger.warning("Payment intent canceled")

def handle_unknown(event: Any) -> None:
    logger.warning("Unknown event type: %s", getattr(event, "type", None))

EVENT_HANDLERS: Dict[str, Callable[[Any], None]] = {
    CHARGE_SUCCEEDED: handle_charge_succeeded,
    PAYMENT_INTENT_FAILED: handle_payment_failed,
    PAYMENT_INTENT_CANCELED: handle_payment_canceled,
}

def dispatch_event(event: Any) -> None:
    """
    Appelle le handler associé au type de l'event (stripe.Event vérifié).
    - Type non reconnu ou absent: warning, jamais une erreur.
    """
    handler = EVENT_HANDLERS.get(getattr(event, "type", None), handle_unknown)
    handler(event)
