from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------------
# Graph storage policy
# ---------------------------------------------------------------------

REMOVAL_STRATEGIES = ("compact", "tombstone")


@dataclass(frozen=True)
class StoreConfig:
    """
    Controls how a GraphStore reclaims handles and checks its own tables.

    removal_strategy:
    - "compact": the last live node moves into the vacated slot and every
      reference to its old handle is rewritten
    - "tombstone": the vacated slot is retired and never reused
    """

    removal_strategy: Literal["compact", "tombstone"] = "compact"
    verify_invariants: bool = False
    default_name: str = ""

    def __post_init__(self) -> None:
        if self.removal_strategy not in REMOVAL_STRATEGIES:
            raise ValueError(
                f"removal_strategy must be one of {REMOVAL_STRATEGIES}, "
                f"got {self.removal_strategy!r}"
            )
        if not isinstance(self.default_name, str):
            raise ValueError("default_name must be a string")


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class UndigraphConfig:
    """
    Root configuration object for undigraph.

    Constructed explicitly and passed to the components that need it.
    """

    store: StoreConfig
    log_level: str = "INFO"
