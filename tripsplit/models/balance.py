from pydantic import BaseModel, Field, ConfigDict


class Balance(BaseModel):
    """Derived per-participant position. Never stored."""
    model_config = ConfigDict(frozen=True)

    name: str
    paid: float = 0.0
    owed: float = 0.0
    net: float = 0.0  # paid - owed; > 0 is owed money by the group


class TransactionSuggestion(BaseModel):
    """A proposed or outstanding payment, amount always > 0."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_user: str = Field(alias="from")
    to_user: str = Field(alias="to")
    amount: float
