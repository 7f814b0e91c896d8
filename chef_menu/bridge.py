"""Menu handoff between screens.

Each screen visit decodes the snapshot it was given, edits a private working
copy, and produces exactly one outbound NavigationMessage when it exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping

from chef_menu import codec
from chef_menu.collection import MenuCollection
from chef_menu.config import LOGIN_ROUTE, PARAM_DISHES, PARAM_NEW_DISH, PARAM_ROLE
from chef_menu.errors import MalformedStateError, VisitClosedError
from chef_menu.models import DishRecord, Role

logger = logging.getLogger(__name__)


class VisitState(Enum):
    ACTIVE = "active"
    EXITING = "exiting"


class Decision(Enum):
    """Outcome of a confirmation prompt."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


def gate(
    decision: Decision,
    collection: MenuCollection,
    action: Callable[[MenuCollection], MenuCollection],
) -> MenuCollection:
    """Apply a destructive action only when it was confirmed."""
    if decision is Decision.CONFIRMED:
        return action(collection)
    return collection


@dataclass(frozen=True)
class NavigationMessage:
    """One-shot message handed to the next screen."""

    route: str
    params: dict[str, str] = field(default_factory=dict)


class ScreenVisit:
    """
    State for one visit of one screen.

    ACTIVE until one of confirm/back/cancel/logout is called, then EXITING.
    An exited visit refuses further edits and exits.
    """

    def __init__(self, incoming: str | None, role: Role, working: MenuCollection) -> None:
        self.incoming = incoming
        self.role = role
        self.state = VisitState.ACTIVE
        self._working = working
        self._applied_side_channel_ids: set[str] = set()

    @classmethod
    def open(cls, params: Mapping[str, str] | None = None) -> ScreenVisit:
        params = params or {}
        incoming = params.get(PARAM_DISHES)
        role = Role.from_param(params.get(PARAM_ROLE))
        try:
            working = codec.decode(incoming)
        except MalformedStateError as exc:
            logger.warning("Ignoring malformed menu snapshot: %s", exc)
            working = MenuCollection()
        return cls(incoming=incoming, role=role, working=working)

    @property
    def working(self) -> MenuCollection:
        return self._working

    @property
    def is_active(self) -> bool:
        return self.state is VisitState.ACTIVE

    def replace(self, collection: MenuCollection) -> MenuCollection:
        self._ensure_active()
        self._working = collection
        return collection

    def apply_side_channel(self, raw: str | None) -> DishRecord | None:
        """
        Append a dish created elsewhere, at most once per visit.

        Returns the appended dish, or None when there was nothing new to add.
        """
        self._ensure_active()
        if not raw:
            return None
        try:
            dish = codec.decode_dish(raw)
        except MalformedStateError as exc:
            logger.warning("Ignoring malformed side-channel dish: %s", exc)
            return None

        if dish.id in self._applied_side_channel_ids or dish.id in self._working:
            self._applied_side_channel_ids.add(dish.id)
            return None

        self._applied_side_channel_ids.add(dish.id)
        self._working = self._working.append(dish)
        logger.debug("Side-channel dish appended id=%s name=%r", dish.id, dish.name)
        return dish

    def confirm(
        self,
        route: str,
        *,
        new_dish: DishRecord | None = None,
        role: Role | None = None,
    ) -> NavigationMessage:
        """Leave with the working menu encoded for the next screen."""
        self._ensure_active()
        outgoing_role = role or self.role
        params = {PARAM_ROLE: outgoing_role.value, PARAM_DISHES: codec.encode(self._working)}
        if new_dish is not None:
            params[PARAM_NEW_DISH] = codec.encode_dish(new_dish)
        return self._exit("confirm", NavigationMessage(route, params))

    def back(self, route: str) -> NavigationMessage:
        return self.confirm(route)

    def cancel(self, route: str) -> NavigationMessage:
        """Leave forwarding the snapshot exactly as it arrived."""
        self._ensure_active()
        params = {PARAM_ROLE: self.role.value}
        if self.incoming is not None:
            params[PARAM_DISHES] = self.incoming
        return self._exit("cancel", NavigationMessage(route, params))

    def logout(self, route: str = LOGIN_ROUTE) -> NavigationMessage:
        """Leave for the entry screen carrying the menu but no role."""
        self._ensure_active()
        params = {PARAM_DISHES: codec.encode(self._working)}
        return self._exit("logout", NavigationMessage(route, params))

    def _exit(self, kind: str, message: NavigationMessage) -> NavigationMessage:
        self.state = VisitState.EXITING
        logger.debug("Visit exit kind=%s route=%s dishes=%d", kind, message.route, len(self._working))
        return message

    def _ensure_active(self) -> None:
        if self.state is not VisitState.ACTIVE:
            raise VisitClosedError("screen visit has already produced its outbound message")
