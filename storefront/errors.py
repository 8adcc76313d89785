from typing import Any, Dict

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class StorefrontError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message}


class InvalidCredentials(StorefrontError):
    status_code = 400

    def __init__(self, message: str = "Invalid Password"):
        super().__init__(message)

    def payload(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class ValidationFailure(StorefrontError):
    status_code = 422


class UniquenessViolation(StorefrontError):
    status_code = 409

    def __init__(self, message: str = "An account with this email already exists"):
        super().__init__(message)


class DependencyFailure(StorefrontError):
    """Database or payment provider call failed."""


class CheckoutFailure(DependencyFailure):
    def __init__(self, message: str = "Could not create payment session"):
        super().__init__(message)

    def payload(self) -> Dict[str, Any]:
        return {"error": self.message}


async def storefront_error_handler(request: Request, exc: StorefrontError):
    return JSONResponse(status_code=exc.status_code, content=exc.payload())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    reasons = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        reasons.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return await storefront_error_handler(request, ValidationFailure("; ".join(reasons)))
