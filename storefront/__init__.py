"""Storefront backend: login, Stripe checkout, orders and contact inquiries."""
