"""
Request records

Each payload is validated here before anything touches the database.
"""
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    # No minimum length: an empty password is a valid first credential.
    password: str


class CartItem(BaseModel):
    name: str = Field(..., min_length=1, description="Product name shown on the Stripe page")
    price: float = Field(..., ge=0, allow_inf_nan=False,
                         description="Unit price in major currency units")


class CheckoutRequest(BaseModel):
    items: List[CartItem] = Field(..., min_length=1)
    email: EmailStr


class InquiryRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    message: str = Field(..., min_length=1)
    service: Optional[str] = None


class OrderRequest(BaseModel):
    items: List[CartItem] = Field(..., min_length=1)
    email: Optional[EmailStr] = None
