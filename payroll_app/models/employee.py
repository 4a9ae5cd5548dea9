from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from payroll_app.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(200), unique=True, index=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def public(self) -> dict:
        return self.as_dict(exclude=("password_hash",))
