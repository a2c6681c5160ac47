"""Swap status tables.

Each leg engine publishes a table describing its statuses. The boost swap
table is built by layering the leg tables and a set of overrides: later
layers win per status key, and an override only replaces the attributes it
sets.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence

from bridgeswap.assets import pretty_balance

logger = logging.getLogger(__name__)


class StatusTableError(Exception):
    """Raised when a status table cannot be assembled."""

    pass


class StatusKind(str, Enum):
    """Coarse classification of a status."""

    PENDING = "pending"
    COMPLETED = "completed"
    REFUNDED = "refunded"
    FAILED = "failed"


@dataclass(frozen=True)
class StatusDescriptor:
    """Display and progress metadata for one status."""

    label: str
    step: int
    kind: StatusKind = StatusKind.PENDING
    # Pure function of the swap record returning a message
    notification: Optional[Callable[[Any], str]] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != StatusKind.PENDING

    @property
    def is_success(self) -> bool:
        return self.kind == StatusKind.COMPLETED

    def format_label(self, swap: Any) -> str:
        """Fill asset placeholders ({from_asset}, {to_asset}, {bridge_asset})."""
        return self.label.format(
            from_asset=getattr(swap, "from_asset", ""),
            to_asset=getattr(swap, "to_asset", ""),
            bridge_asset=getattr(swap, "bridge_asset", ""),
        )

    def notify(self, swap: Any) -> Optional[str]:
        if self.notification is None:
            return None
        return self.notification(swap)


@dataclass(frozen=True)
class StatusOverride:
    """Partial descriptor; attributes left as None are inherited."""

    label: Optional[str] = None
    step: Optional[int] = None
    kind: Optional[StatusKind] = None
    notification: Optional[Callable[[Any], str]] = None

    def apply(self, descriptor: StatusDescriptor) -> StatusDescriptor:
        changes = {
            name: value
            for name, value in (
                ("label", self.label),
                ("step", self.step),
                ("kind", self.kind),
                ("notification", self.notification),
            )
            if value is not None
        }
        return replace(descriptor, **changes)


def build_status_table(
    layers: Sequence[Mapping[str, StatusDescriptor]],
    overrides: Optional[Mapping[str, StatusOverride]] = None,
) -> Mapping[str, StatusDescriptor]:
    """Merge status layers, then apply overrides.

    Layers are merged in order, a later layer replacing an earlier entry
    with the same key. Each override is applied on top of the merged entry
    for its key.

    Raises:
        StatusTableError: if an override names a status no layer defines

    Returns:
        Read-only mapping of status key -> descriptor
    """
    table: dict[str, StatusDescriptor] = {}
    for layer in layers:
        table.update(layer)

    for key, override in (overrides or {}).items():
        if key not in table:
            raise StatusTableError(f"Override for unknown status {key!r}")
        table[key] = override.apply(table[key])

    logger.debug(f"Built status table with {len(table)} statuses from {len(layers)} layers")
    return MappingProxyType(table)


def _swap_completed(swap: Any) -> str:
    return f"Swap completed, {pretty_balance(swap.to_amount, swap.to_asset)} {swap.to_asset} ready to use"


# ======================
# Atomic swap (leg 1)
# ======================

ATOMIC_SWAP_STATUSES: Mapping[str, StatusDescriptor] = MappingProxyType({
    "INITIATED": StatusDescriptor(label="Locking {from_asset}", step=0),
    "INITIATION_REPORTED": StatusDescriptor(
        label="Locking {from_asset}",
        step=0,
        notification=lambda swap: "Swap initiated",
    ),
    "INITIATION_CONFIRMED": StatusDescriptor(label="Locking {from_asset}", step=0),
    "FUNDED": StatusDescriptor(label="Locking {to_asset}", step=1),
    "CONFIRM_COUNTER_PARTY_INITIATION": StatusDescriptor(
        label="Locking {to_asset}",
        step=1,
        notification=lambda swap: (
            f"Counterparty sent {pretty_balance(swap.to_amount, swap.to_asset)} "
            f"{swap.to_asset} to escrow"
        ),
    ),
    "READY_TO_CLAIM": StatusDescriptor(
        label="Claiming {to_asset}",
        step=2,
        notification=lambda swap: f"Claiming {swap.to_asset}",
    ),
    "WAITING_FOR_CLAIM_CONFIRMATIONS": StatusDescriptor(label="Claiming {to_asset}", step=2),
    "WAITING_FOR_REFUND": StatusDescriptor(label="Pending Refund", step=2),
    "GET_REFUND": StatusDescriptor(label="Refunding {from_asset}", step=2),
    "WAITING_FOR_REFUND_CONFIRMATIONS": StatusDescriptor(label="Refunding {from_asset}", step=2),
    "REFUNDED": StatusDescriptor(
        label="Refunded",
        step=3,
        kind=StatusKind.REFUNDED,
        notification=lambda swap: f"Swap refunded, {swap.from_asset} returned to your wallet",
    ),
    "SUCCESS": StatusDescriptor(
        label="Completed",
        step=3,
        kind=StatusKind.COMPLETED,
        notification=_swap_completed,
    ),
    "QUOTE_EXPIRED": StatusDescriptor(label="Quote Expired", step=3, kind=StatusKind.REFUNDED),
})


# ======================
# DEX aggregator (leg 2)
# ======================

DEX_SWAP_STATUSES: Mapping[str, StatusDescriptor] = MappingProxyType({
    "WAITING_FOR_APPROVE_CONFIRMATIONS": StatusDescriptor(
        label="Approving {from_asset}",
        step=0,
        notification=lambda swap: f"Approving {swap.from_asset}",
    ),
    "APPROVE_CONFIRMED": StatusDescriptor(label="Swapping {from_asset}", step=1),
    "WAITING_FOR_SWAP_CONFIRMATIONS": StatusDescriptor(
        label="Swapping {from_asset}",
        step=1,
        notification=lambda swap: "Swap submitted, waiting for confirmations",
    ),
    "SUCCESS": StatusDescriptor(
        label="Completed",
        step=2,
        kind=StatusKind.COMPLETED,
        notification=_swap_completed,
    ),
    "FAILED": StatusDescriptor(
        label="Swap Failed",
        step=2,
        kind=StatusKind.FAILED,
        notification=lambda swap: "Swap failed",
    ),
})
