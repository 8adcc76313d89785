import logging

from fastapi import APIRouter

from storefront.auth import create_token, login_or_register
from storefront.checkout import build_line_items, order_total
from storefront.config import settings
from storefront.database import SessionLocal
from storefront.errors import CheckoutFailure, DependencyFailure, StorefrontError
from storefront.models import Inquiry, Order, OrderStatus
from storefront.schemas import CheckoutRequest, InquiryRequest, LoginRequest, OrderRequest
from storefront.stripe_service import create_checkout_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/auth/login")
def login(request: LoginRequest):
    db = SessionLocal()
    try:
        user = login_or_register(db, request.email, request.password)
        token = create_token(user.id)
        return {"success": True, "token": token, "email": user.email}
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception("Login failed")
        raise DependencyFailure(str(exc))
    finally:
        db.close()


@router.post("/create-checkout-session")
def create_checkout(request: CheckoutRequest):
    line_items = build_line_items(request.items, settings.currency)

    try:
        session = create_checkout_session(line_items, request.email)
    except Exception:
        logger.exception("Stripe checkout session creation failed")
        raise CheckoutFailure()

    db = SessionLocal()
    try:
        order = Order(
            items=[item.model_dump() for item in request.items],
            total=order_total(line_items),
            customer_email=request.email,
            stripe_session_id=session.id,
            status=OrderStatus.PENDING.value,
        )
        db.add(order)
        db.commit()
        logger.info("Order %s pending on session %s", order.id, session.id)
    except Exception:
        db.rollback()
        logger.exception("Order save failed, session %s is orphaned", session.id)
        raise CheckoutFailure()
    finally:
        db.close()

    return {"url": session.url}


@router.post("/inquiry", status_code=201)
def create_inquiry(request: InquiryRequest):
    db = SessionLocal()
    try:
        inquiry = Inquiry(**request.model_dump())
        db.add(inquiry)
        db.commit()
        logger.info("Stored inquiry %s", inquiry.id)
    except Exception as exc:
        db.rollback()
        logger.exception("Inquiry save failed")
        raise DependencyFailure(str(exc))
    finally:
        db.close()

    return {"success": True, "message": "Inquiry stored successfully!"}


@router.post("/orders", status_code=201)
def create_order(request: OrderRequest):
    """Save an order directly, without a payment step."""
    db = SessionLocal()
    try:
        order = Order(
            items=[item.model_dump() for item in request.items],
            total=order_total(build_line_items(request.items, settings.currency)),
            customer_email=request.email,
            status=OrderStatus.PENDING.value,
        )
        db.add(order)
        db.commit()
        logger.info("Saved order %s", order.id)
    except Exception as exc:
        db.rollback()
        logger.exception("Order save failed")
        raise DependencyFailure(str(exc))
    finally:
        db.close()

    return {"success": True, "message": "Order saved successfully!"}
