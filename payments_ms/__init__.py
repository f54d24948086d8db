"""Micro-service de paiements: sessions Stripe Checkout et webhook Stripe."""

__version__ = "0.1.0"
