from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from survey_dashboard.core.dataset import Dataset

ALL = "All"


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection.

    Fields:

    - gender: a Gender value present in the dataset, or "All"
    - payment_method: a PaymentMethod value present in the dataset, or "All"
    - chain: a Chain value present in the dataset, or "All"

    Replaced wholesale on every dropdown change or reset, never mutated.
    """

    gender: str = ALL
    payment_method: str = ALL
    chain: str = ALL

    @classmethod
    def default(cls) -> FilterState:
        return cls()

    @property
    def is_default(self) -> bool:
        return self == FilterState.default()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        """
        Missing or None fields become "All". The empty string is a real
        category value and is kept as is.
        """
        data = data or {}

        def value(key: str) -> str:
            v = data.get(key)
            return ALL if v is None else str(v)

        return cls(
            gender=value("gender"),
            payment_method=value("payment_method"),
            chain=value("chain"),
        )

    def sanitised(self, dataset: Dataset) -> FilterState:
        """
        Return a copy where any value not in the dataset's domain is reset to "All".
        """
        valid = dataset.valid_sets()

        def keep(value: str, domain) -> str:
            return value if value == ALL or value in domain else ALL

        return FilterState(
            gender=keep(self.gender, valid.genders),
            payment_method=keep(self.payment_method, valid.payment_methods),
            chain=keep(self.chain, valid.chains),
        )
