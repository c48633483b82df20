# shopcart/domain/errors.py


class ShopError(Exception):
    """Bazowy wyjatek regul biznesowych koszyka i zamowien."""


class NotFoundError(ShopError, ValueError):
    """Brak produktu, koszyka, zamowienia lub uzytkownika."""


class EmptyCartError(ShopError, ValueError):
    """Proba zlozenia zamowienia z pustego koszyka."""


class ForbiddenError(ShopError, PermissionError):
    """Zamowienie nalezy do innego uzytkownika."""


class InvalidStateError(ShopError, ValueError):
    """Operacja niedozwolona w obecnym statusie zamowienia."""
