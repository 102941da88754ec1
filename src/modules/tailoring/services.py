"""Tailoring service layer.

``MeasurementService`` is shared by the blouse, salwar and lehenga sheets;
the measurement kind is a constructor argument.  Every write first checks
that the linked custom order (if any) belongs to the measured user, through
the single ``_ensure_custom_order_owned`` routine.

``CustomOrderService`` prices new custom orders from the catalog and moves
them through ``CUSTOM_ORDER_TRANSITIONS``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Type

import structlog
from django.db import models, transaction
from django.utils import timezone

from modules.accounts.exceptions import InactiveUser, UserNotFound
from modules.core.pricing import to_money
from modules.tailoring.constants import CUSTOM_ORDER_TRANSITIONS, CustomOrderStatus
from modules.tailoring.exceptions import (
    CustomOrderNotFound,
    CustomOrderNotOwned,
    GarmentModelNotFound,
    InvalidCustomOrderStatus,
    MeasurementNotFound,
)
from modules.tailoring.models import CustomOrder

if TYPE_CHECKING:
    from modules.accounts.models import User
    from modules.accounts.repositories.interfaces import IUserRepository
    from modules.catalog.repositories.interfaces import ICatalogRepository
    from modules.tailoring.dtos import CreateCustomOrderDTO, MeasurementDTO
    from modules.tailoring.repositories.interfaces import (
        ICustomOrderRepository,
        IMeasurementRepository,
    )

logger = structlog.get_logger(__name__)


class MeasurementService:
    def __init__(
        self,
        repository: IMeasurementRepository,
        model: Type[models.Model],
        fields: Iterable[str],
        custom_order_repository: ICustomOrderRepository,
        user_repository: IUserRepository,
    ) -> None:
        self._repo = repository
        self._model = model
        self._fields = tuple(fields)
        self._custom_orders = custom_order_repository
        self._users = user_repository
        self._kind = model._meta.model_name

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    def _get_user(self, user_id: Any) -> User:
        user = self._users.get_by_id(str(user_id))
        if not user:
            raise UserNotFound(f"User {user_id} not found.")
        return user

    def _ensure_custom_order_owned(self, custom_order_id: Any, user_id: Any) -> CustomOrder:
        """Return the custom order if *user_id* owns it.

        Raises:
            CustomOrderNotOwned: missing, or owned by someone else.
        """
        custom_order = self._custom_orders.get_owned(str(custom_order_id), str(user_id))
        if not custom_order:
            logger.warning(
                "measurement.ownership_rejected",
                kind=self._kind,
                custom_order_id=str(custom_order_id),
                user_id=str(user_id),
            )
            raise CustomOrderNotOwned(
                f"Custom order {custom_order_id} not found or does not belong to this user."
            )
        return custom_order

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: MeasurementDTO, measured_by: str = "Admin") -> Any:
        """Create a measurement sheet for ``dto.user_id``.

        Raises:
            ValueError: ``user_id`` missing.
            UserNotFound: the user does not exist.
            CustomOrderNotOwned: the custom order is not the user's.
        """
        if dto.user_id is None:
            raise ValueError("user_id is required.")
        user = self._get_user(dto.user_id)

        custom_order = None
        if dto.custom_order_id is not None:
            custom_order = self._ensure_custom_order_owned(dto.custom_order_id, user.id)

        measurement = self._model(
            user=user,
            custom_order=custom_order,
            notes=dto.notes or "",
            measured_by=dto.measured_by or measured_by,
            measurement_date=dto.measurement_date or timezone.now(),
            **dto.measurement_values(self._fields),
        )
        measurement = self._repo.save(measurement)
        logger.info(
            "measurement.created",
            kind=self._kind,
            measurement_id=str(measurement.id),
            user_id=str(user.id),
            custom_order_id=str(custom_order.id) if custom_order else None,
        )
        return measurement

    @transaction.atomic
    def update(self, id: str, dto: MeasurementDTO) -> Any:
        """Overwrite the supplied fields, keeping the rest.

        The ownership check runs against the resulting (user, custom order)
        pair, so changing only the user is validated too.

        Raises:
            MeasurementNotFound: the measurement does not exist.
            UserNotFound: a new ``user_id`` does not exist.
            CustomOrderNotOwned: the resulting pair does not match.
        """
        measurement = self.get(id)

        user_id = measurement.user_id
        if dto.user_id is not None:
            user_id = self._get_user(dto.user_id).id

        custom_order_id = dto.custom_order_id or measurement.custom_order_id
        if custom_order_id is not None:
            self._ensure_custom_order_owned(custom_order_id, user_id)

        measurement.user_id = user_id
        measurement.custom_order_id = custom_order_id
        for field, value in dto.measurement_values(self._fields).items():
            setattr(measurement, field, value)
        for field in ("notes", "measured_by", "measurement_date"):
            value = getattr(dto, field)
            if value is not None:
                setattr(measurement, field, value)

        measurement = self._repo.save(measurement)
        logger.info("measurement.updated", kind=self._kind, measurement_id=str(id))
        return measurement

    @transaction.atomic
    def delete(self, id: str) -> None:
        if not self._repo.delete(id):
            raise MeasurementNotFound(f"Measurement {id} not found.")
        logger.info("measurement.deleted", kind=self._kind, measurement_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, id: str) -> Any:
        measurement = self._repo.get_by_id(id)
        if not measurement:
            raise MeasurementNotFound(f"Measurement {id} not found.")
        return measurement

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        return self._repo.list(filters)


class CustomOrderService:
    def __init__(
        self,
        repository: ICustomOrderRepository,
        user_repository: IUserRepository,
        model_repositories: Dict[str, ICatalogRepository],
    ) -> None:
        self._repo = repository
        self._users = user_repository
        # garment type -> catalog repository of its models
        self._model_repos = model_repositories

    @transaction.atomic
    def create(self, dto: CreateCustomOrderDTO) -> CustomOrder:
        """Place a custom order priced from the chosen catalog model.

        Blouse models add their stitching charge to the model price.

        Raises:
            UserNotFound / InactiveUser: the customer cannot order.
            GarmentModelNotFound: model missing, inactive or of another garment.
        """
        user = self._users.get_by_id(str(dto.user_id))
        if not user:
            raise UserNotFound(f"User {dto.user_id} not found.")
        if not user.is_active:
            raise InactiveUser(f"User {dto.user_id} is inactive.")

        repository = self._model_repos.get(dto.garment_type)
        garment_model = repository.get_by_id(str(dto.model_id)) if repository else None
        if not garment_model or not garment_model.is_active:
            raise GarmentModelNotFound(
                f"{dto.garment_type} model {dto.model_id} not found."
            )

        price = garment_model.final_price + getattr(garment_model, "stitch_cost", Decimal("0"))
        custom_order = CustomOrder(
            user=user,
            garment_type=dto.garment_type,
            model_name=garment_model.name,
            fabric=dto.fabric,
            fabric_color=dto.fabric_color,
            front_design=dto.front_design,
            back_design=dto.back_design,
            price=to_money(price),
            notes=dto.notes,
            appointment_date=dto.appointment_date,
            appointment_type=dto.appointment_type or "",
        )
        custom_order = self._repo.save(custom_order)
        logger.info(
            "custom_order.created",
            custom_order_id=str(custom_order.id),
            user_id=str(user.id),
            garment_type=dto.garment_type,
            price=str(custom_order.price),
        )
        return custom_order

    @transaction.atomic
    def update_status(
        self,
        id: str,
        new_status: str,
        actor: User,
        notes: str = "",
    ) -> CustomOrder:
        """Move a custom order to *new_status* on behalf of *actor*.

        Customers only see their own custom orders and may only cancel
        ``PENDING`` / ``CONFIRMED`` ones.
        Each change is recorded in the status history together with
        *notes*.

        Raises:
            CustomOrderNotFound: missing (or not the actor's).
            InvalidCustomOrderStatus: not allowed for the actor's role.
        """
        custom_order = self._repo.get_for_update(str(id))
        if not custom_order or (not actor.is_admin and str(custom_order.user_id) != str(actor.id)):
            raise CustomOrderNotFound(f"Custom order {id} not found.")

        log = logger.bind(
            custom_order_id=str(id),
            current_status=custom_order.status,
            new_status=new_status,
            role=actor.role,
        )
        if not CUSTOM_ORDER_TRANSITIONS.can_transition(custom_order.status, new_status, actor.role):
            log.warning("custom_order.invalid_transition")
            if new_status == CustomOrderStatus.CANCELLED and not actor.is_admin:
                raise InvalidCustomOrderStatus(
                    "This order cannot be cancelled. Only pending or confirmed "
                    "orders can be cancelled."
                )
            if CUSTOM_ORDER_TRANSITIONS.is_terminal(custom_order.status):
                raise InvalidCustomOrderStatus(
                    f"Custom order is already {custom_order.status} and its status can no "
                    "longer change."
                )
            raise InvalidCustomOrderStatus(
                f"Cannot change custom order status from {custom_order.status} to {new_status}."
            )

        old_status = custom_order.status
        custom_order.status = new_status
        custom_order.save(update_fields=["status", "updated_at"])
        self._repo.add_history(
            custom_order_id=custom_order.id,
            old_status=old_status,
            new_status=new_status,
            user_id=actor.id,
            notes=notes,
        )
        log.info("custom_order.status_updated")
        return custom_order

    def get(self, id: str, user_id: Optional[str] = None) -> CustomOrder:
        if user_id is not None:
            custom_order = self._repo.get_owned(str(id), str(user_id))
        else:
            custom_order = self._repo.get_by_id(str(id))
        if not custom_order:
            raise CustomOrderNotFound(f"Custom order {id} not found.")
        return custom_order

    def list_for_user(self, user_id: str) -> List[CustomOrder]:
        return self._repo.list_for_user(user_id)
