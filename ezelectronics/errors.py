# ezelectronics/errors.py
from fastapi import HTTPException


class EZError(HTTPException):
    """Domain error carrying its own HTTP status and message."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None):
        super().__init__(status_code=self.status_code, detail=message or self.message)


# Products
class ProductNotFoundError(EZError):
    status_code = 404
    message = "Product not found"


class ProductAlreadyExistsError(EZError):
    status_code = 409
    message = "The product already exists"


class EmptyProductStockError(EZError):
    status_code = 409
    message = "Product stock is empty"


class LowProductStockError(EZError):
    status_code = 409
    message = "Product stock cannot satisfy the requested quantity"


class DateError(EZError):
    status_code = 400
    message = "Input date is not compatible with the current date"


class GroupingError(EZError):
    status_code = 422
    message = "Grouping does not match the provided filters"


# Carts
class CartNotFoundError(EZError):
    status_code = 404
    message = "Cart not found"


class EmptyCartError(EZError):
    status_code = 400
    message = "Cart is empty"


class ProductNotInCartError(EZError):
    status_code = 404
    message = "Product not in cart"


# Reviews
class ExistingReviewError(EZError):
    status_code = 409
    message = "You have already reviewed this product"


class NoReviewProductError(EZError):
    status_code = 404
    message = "You have not reviewed this product"


# Users
class UserNotFoundError(EZError):
    status_code = 404
    message = "The user does not exist"


class UserAlreadyExistsError(EZError):
    status_code = 409
    message = "The username already exists"


class UserNotAdminError(EZError):
    status_code = 401
    message = "This operation can be performed only by an admin"


class UserIsAdminError(EZError):
    status_code = 401
    message = "Admins cannot be modified or deleted by other admins"


class UnauthorizedUserError(EZError):
    status_code = 401
    message = "You cannot access the information of other users"


class UserInvalidDate(EZError):
    status_code = 400
    message = "Birthdate cannot be after the current date"


class NotAuthenticatedError(EZError):
    status_code = 401
    message = "Unauthenticated user"


class WrongRoleError(EZError):
    status_code = 401
    message = "User is not allowed to perform this operation"


class WrongCredentialsError(EZError):
    status_code = 401
    message = "Incorrect username and/or password"
