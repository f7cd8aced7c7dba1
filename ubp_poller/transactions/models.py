"""Wire models for the UnionBank transactions API."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionRecord(BaseModel):
    """One transaction as returned by the paginated transactions endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    record_number: str = Field(default="", alias="recordNumber")
    tran_id: str = Field(default="", alias="tranId")
    tran_type: str = Field(default="", alias="tranType")
    amount: str = ""
    currency: str = ""
    tran_date: str = Field(default="", alias="tranDate")
    remarks2: str = ""
    remarks: str = ""
    balance_currency: str = Field(default="", alias="balanceCurrency")
    posted_date: str = Field(default="", alias="postedDate")
    tran_description: str = Field(default="", alias="tranDescription")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @property
    def is_credit(self) -> bool:
        return self.tran_type == "C"


class TransactionPage(BaseModel):
    """Response envelope; only the records list is used."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    records: List[TransactionRecord] = Field(default_factory=list, alias="Records")

    @field_validator("records", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class TokenResponse(BaseModel):
    """Password-grant token response; fields besides the token are ignored."""

    model_config = ConfigDict(extra="ignore")

    access_token: str
