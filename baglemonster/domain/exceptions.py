# baglemonster/domain/exceptions.py
"""
Wyjatki domenowe rzucane przez serwisy.
Dziedzicza po wbudowanych wyjatkach, ktore routery mapuja na kody HTTP.
"""


class NotFoundError(LookupError):
    """Encja o podanym ID nie istnieje."""


class UnauthorizedError(PermissionError):
    """Brak roli lub brak wlasnosci zasobu."""


class ConflictError(ValueError):
    """Naruszenie reguly biznesowej (duplikat, inny sklep, zly stan koszyka)."""


class ConcurrencyError(RuntimeError):
    """Zasob jest modyfikowany rownolegle przez inna operacje."""
