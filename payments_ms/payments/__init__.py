"""
Module 'payments' (feature-first): point d'entrée public.
Réunit construction des sessions Checkout, client Stripe, dispatch des events webhook et service.
"""

from .builder import to_minor_units, to_line_items, make_metadata, build_session_params
from .events import EVENT_HANDLERS, dispatch_event
from .schemas import PaymentLineItem, PaymentSessionRequest
from .service import PaymentsService, PaymentsConfigError, WebhookResult, build_payments_service

__all__ = [
    # builder
    "to_minor_units",
    "to_line_items",
    "make_metadata",
    "build_session_params",
    # events
    "EVENT_HANDLERS",
    "dispatch_event",
    # schemas
    "PaymentLineItem",
    "PaymentSessionRequest",
    # service
    "PaymentsService",
    "PaymentsConfigError",
    "WebhookResult",
    "build_payments_service",
]
