from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

# CSV column -> SurveyRecord attribute
CATEGORICAL_COLUMNS: Dict[str, str] = {
    "Gender": "gender",
    "PaymentMethod": "payment_method",
    "Chain": "chain",
}

NUMERIC_COLUMNS: Dict[str, str] = {
    "Age": "age",
    "Income": "income",
    "PurchaseAmount": "purchase_amount",
    "FamilySize": "family_size",
}

REQUIRED_COLUMNS = list(CATEGORICAL_COLUMNS) + list(NUMERIC_COLUMNS)


@dataclass(frozen=True)
class SurveyRecord:
    """
    One row of the grocery store survey.

    Categorical fields are kept as the exact source text. Numeric fields are
    floats; a value that could not be parsed at load time is NaN and is
    excluded from numeric aggregates.
    """

    gender: str
    payment_method: str
    chain: str
    age: float
    income: float
    purchase_amount: float
    family_size: float

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> SurveyRecord:
        """Build a record from a mapping keyed by CSV column names."""
        return cls(
            gender=str(row["Gender"]),
            payment_method=str(row["PaymentMethod"]),
            chain=str(row["Chain"]),
            age=float(row["Age"]),
            income=float(row["Income"]),
            purchase_amount=float(row["PurchaseAmount"]),
            family_size=float(row["FamilySize"]),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "Gender": self.gender,
            "PaymentMethod": self.payment_method,
            "Chain": self.chain,
            "Age": self.age,
            "Income": self.income,
            "PurchaseAmount": self.purchase_amount,
            "FamilySize": self.family_size,
        }
