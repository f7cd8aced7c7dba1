"""Record model storing transactions fetched from the partner API."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ubp_poller.db.base import Base


class Record(Base):
    """
    One stored transaction, unique by (tran_id, tran_type).

    The table has no primary key of its own; the ORM identifies rows by the
    natural key only. Uniqueness is checked before insert, not enforced by a
    constraint, so existing stores without one keep working.
    """

    __tablename__ = "records"

    account_id: Mapped[str] = mapped_column(String, index=True)

    # Transaction identification
    tran_id: Mapped[str] = mapped_column(String)
    tran_type: Mapped[str] = mapped_column(
        String, comment="'C' for credit, anything else is a debit"
    )

    # Transaction details
    amount: Mapped[str] = mapped_column(String, comment="Decimal amount as sent")
    currency: Mapped[str] = mapped_column(String)
    tran_date: Mapped[str] = mapped_column(String)
    remarks2: Mapped[str] = mapped_column(String)
    remarks: Mapped[str] = mapped_column(String)
    balance_currency: Mapped[str] = mapped_column(String)
    posted_date: Mapped[str] = mapped_column(String)
    tran_description: Mapped[str] = mapped_column(String)

    __table_args__ = (Index("idx_records_tran_id_type", "tran_id", "tran_type"),)

    __mapper_args__ = {"primary_key": [tran_id, tran_type]}

    def __repr__(self) -> str:
        return (
            f"<Record(account_id={self.account_id}, tran_id={self.tran_id}, "
            f"tran_type={self.tran_type}, amount={self.amount})>"
        )
