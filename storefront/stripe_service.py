from typing import Any, Dict, List

import stripe

from storefront.config import settings

stripe.api_key = settings.stripe_secret_key
stripe.default_http_client = stripe.RequestsClient(timeout=settings.stripe_timeout)


def success_url() -> str:
    # {CHECKOUT_SESSION_ID} is filled in by Stripe on redirect
    return f"{settings.frontend_url}/success.html?session_id={{CHECKOUT_SESSION_ID}}"


def cancel_url() -> str:
    return f"{settings.frontend_url}/cancel.html"


def create_checkout_session(line_items: List[Dict[str, Any]], email: str):
    return stripe.checkout.Session.create(
        payment_method_types=["card"],
        line_items=line_items,
        mode="payment",
        customer_email=email,
        success_url=success_url(),
        cancel_url=cancel_url(),
    )
