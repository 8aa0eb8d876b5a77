"""
Entité ordre de service.

Porte la machine à états du cycle de vie et les règles de prix :

    OPEN -> IN_PROGRESS -> FINISHED

Le statut n'avance que d'un cran à la fois, ne revient jamais en arrière et
FINISHED est terminal. Terminer un ordre exige un prix ; le prix n'est plus
modifiable une fois l'ordre terminé.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from osservice.core.errors import (
    AlreadySetError,
    InvalidStateError,
    InvalidTransitionError,
    MissingPriceError,
    ValidationError,
)
from osservice.utils.constants import (
    DEFAULT_CURRENCY,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)
from osservice.utils.helpers import new_id, utcnow


class ServiceOrderStatus(Enum):
    """Statut d'un ordre de service."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# Seules transitions autorisees via change_status()
ALLOWED_TRANSITIONS: frozenset[tuple[ServiceOrderStatus, ServiceOrderStatus]] = frozenset({
    (ServiceOrderStatus.OPEN, ServiceOrderStatus.IN_PROGRESS),
    (ServiceOrderStatus.IN_PROGRESS, ServiceOrderStatus.FINISHED),
})

PriceInput = Union[Decimal, int, float, str]

# Bornes de la colonne NUMERIC(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES)
_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
_PRICE_LIMIT = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)


def _to_price(value: PriceInput) -> Decimal:
    """Convertit une valeur en Decimal fini, ou leve ValidationError."""
    if isinstance(value, bool):
        raise ValidationError("Le prix doit etre un nombre.", field="price")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError("Le prix doit etre un nombre.", field="price") from None
    if not price.is_finite():
        raise ValidationError("Le prix doit etre un nombre fini.", field="price")
    if abs(price) >= _PRICE_LIMIT:
        raise ValidationError(
            f"Le prix doit avoir au plus {PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES} chiffres avant la virgule.",
            field="price",
        )
    # Les zeros superflus sont acceptes, pas une troisieme decimale significative
    if price.as_tuple().exponent < -PRICE_DECIMAL_PLACES:
        quantized = price.quantize(_PRICE_QUANTUM)
        if quantized != price:
            raise ValidationError(
                f"Le prix doit avoir au plus {PRICE_DECIMAL_PLACES} decimales.", field="price"
            )
        price = quantized
    return price


def _to_currency(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return DEFAULT_CURRENCY
    currency = value.strip().upper()
    if len(currency) != 3 or not currency.isalpha():
        raise ValidationError("La devise doit etre un code de 3 lettres.", field="currency")
    return currency


@dataclass
class ServiceOrder:
    """
    Ordre de service ouvert pour un client.

    Attributs :
        id : Identifiant opaque unique
        number : Numéro séquentiel affiché (0 tant que non persisté)
        customer_id : Client propriétaire
        description : Description du travail (1 à 500 caractères)
        status : Statut courant
        opened_at : Date d'ouverture
        started_at : Date de passage en cours
        finished_at : Date de clôture
        price : Prix (None tant que non renseigné)
        currency : Code devise sur 3 lettres
        price_updated_at : Date de la dernière modification du prix
    """

    id: str
    customer_id: str
    description: str
    number: int = 0
    status: ServiceOrderStatus = ServiceOrderStatus.OPEN
    opened_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = DEFAULT_CURRENCY
    price_updated_at: Optional[datetime] = None

    @classmethod
    def open(cls, customer_id: str, description: str) -> "ServiceOrder":
        """
        Ouvre un nouvel ordre de service (statut OPEN, sans prix).

        Raises:
            ValidationError: Client absent ou description hors bornes
        """
        if customer_id is None or not str(customer_id).strip():
            raise ValidationError("Le client est obligatoire.", field="customer_id")

        if description is None or not description.strip():
            raise ValidationError("La description est obligatoire.", field="description")

        description = description.strip()
        if not DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"La description doit contenir entre {DESCRIPTION_MIN_LENGTH} "
                f"et {DESCRIPTION_MAX_LENGTH} caractères.",
                field="description",
            )

        return cls(
            id=new_id(),
            customer_id=str(customer_id).strip(),
            description=description,
            status=ServiceOrderStatus.OPEN,
            opened_at=utcnow(),
            currency=DEFAULT_CURRENCY,
        )

    @classmethod
    def reconstitute(
        cls,
        id: str,
        number: int,
        customer_id: str,
        description: str,
        status: ServiceOrderStatus,
        opened_at: datetime,
        started_at: Optional[datetime],
        finished_at: Optional[datetime],
        price: Optional[Decimal],
        currency: Optional[str],
        price_updated_at: Optional[datetime],
    ) -> "ServiceOrder":
        """Reconstruit un ordre depuis la base, sans revalidation."""
        return cls(
            id=id,
            number=number,
            customer_id=customer_id,
            description=description,
            status=status,
            opened_at=opened_at,
            started_at=started_at,
            finished_at=finished_at,
            price=price,
            currency=currency,
            price_updated_at=price_updated_at,
        )

    @property
    def is_finished(self) -> bool:
        return self.status is ServiceOrderStatus.FINISHED

    def start(self) -> None:
        """
        Démarre l'exécution de l'ordre.

        Raises:
            InvalidTransitionError: Si l'ordre n'est pas OPEN
        """
        if self.status is not ServiceOrderStatus.OPEN:
            raise InvalidTransitionError(
                f"Impossible de démarrer l'ordre : statut {self.status.value}, attendu open."
            )
        self.status = ServiceOrderStatus.IN_PROGRESS
        self.started_at = utcnow()

    def finish(self) -> None:
        """
        Termine l'ordre.

        Raises:
            InvalidTransitionError: Si l'ordre n'est pas IN_PROGRESS
            MissingPriceError: Si aucun prix n'est renseigné
        """
        if self.status is not ServiceOrderStatus.IN_PROGRESS:
            raise InvalidTransitionError(
                f"Impossible de terminer l'ordre : statut {self.status.value}, attendu in_progress."
            )
        if self.price is None:
            raise MissingPriceError("Impossible de terminer un ordre de service sans prix.")
        self.status = ServiceOrderStatus.FINISHED
        self.finished_at = utcnow()

    def update_price(self, price: PriceInput, currency: Optional[str] = None) -> None:
        """
        Met à jour le prix et horodate la modification.

        Args:
            price: Nouveau prix (>= 0)
            currency: Code devise, DEFAULT_CURRENCY si absent

        Raises:
            InvalidStateError: Si l'ordre est terminé
            ValidationError: Si le prix est négatif ou invalide
        """
        if self.is_finished:
            raise InvalidStateError("Impossible de modifier le prix d'un ordre terminé.")

        value = _to_price(price)
        if value < 0:
            raise ValidationError("Le prix ne peut pas être négatif.", field="price")

        self.price = value
        self.currency = _to_currency(currency)
        self.price_updated_at = utcnow()

    def change_status(self, new_status: ServiceOrderStatus) -> None:
        """
        Point d'entrée unique des changements de statut demandés de l'extérieur.

        Transitions valides : OPEN -> IN_PROGRESS, IN_PROGRESS -> FINISHED.
        Les préconditions de start()/finish() s'appliquent.

        Raises:
            InvalidTransitionError: Transition non autorisée
            MissingPriceError: Passage à FINISHED sans prix
        """
        if (self.status, new_status) not in ALLOWED_TRANSITIONS:
            raise InvalidTransitionError(
                f"Transition de statut invalide : {self.status.value} -> {new_status.value}."
            )

        if new_status is ServiceOrderStatus.IN_PROGRESS:
            self.start()
        else:
            self.finish()

    def set_number(self, number: int) -> None:
        """
        Assigne le numéro séquentiel généré à l'insertion.

        Raises:
            AlreadySetError: Si le numéro est déjà assigné
        """
        if self.number != 0:
            raise AlreadySetError(f"Numéro déjà assigné : {self.number}.")
        self.number = number
