from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity >= 0", name="ck_jobs_equity_non_negative"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity_max"),
    )

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[int | None] = mapped_column(Integer)
    equity: Mapped[Decimal | None] = mapped_column(Numeric)
    company_handle: Mapped[str] = mapped_column(String(25), nullable=False, index=True)
