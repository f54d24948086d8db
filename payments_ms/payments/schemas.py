"""
Schémas d'entrée/sortie de la feature 'payments' (validation pydantic).
"""
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentLineItem(BaseModel):
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    quantity: int = Field(gt=0)


class PaymentSessionRequest(BaseModel):
    """
    Corps de POST /payments/create-payment-session.
    - currency: code ISO 4217 (ex: "usd"), normalisé en minuscules
    - items: au moins un article, ordre conservé
    - orderId: identifiant opaque de la commande côté appelant
    """
    model_config = ConfigDict(populate_by_name=True)

    currency: str = Field(min_length=3, max_length=3)
    items: List[PaymentLineItem] = Field(min_length=1)
    order_id: str = Field(alias="orderId", min_length=1)

    @field_validator("currency")
    @classmethod
    def _lower_currency(cls, v: str) -> str:
        return v.strip().lower()


class RedirectAck(BaseModel):
    ok: bool
    message: str
