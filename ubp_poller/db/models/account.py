"""Account model holding one set of partner API credentials."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ubp_poller.db.base import Base


class Account(Base):
    """
    A UnionBank account the poller fetches transactions for.

    Rows are managed outside this program and only ever read here.
    """

    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    number: Mapped[str] = mapped_column(String, comment="Bank account number")
    name: Mapped[str] = mapped_column(
        String, comment="Display name used in notifications"
    )

    # Partner API credentials
    client_id: Mapped[str] = mapped_column(String)
    client_secret: Mapped[str] = mapped_column(String)
    username: Mapped[str] = mapped_column(String)
    password: Mapped[str] = mapped_column(String)
    partner_id: Mapped[str] = mapped_column(String)

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, number={self.number}, name={self.name})>"
