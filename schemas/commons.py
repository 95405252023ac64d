from decimal import Decimal
from typing import Annotated

from pydantic import Field, StringConstraints

JobId = Annotated[
    str,
    Field(
        pattern=r"^job_[a-f0-9]+$",
        description="채용공고 ID",
        examples=["job_a1b2c3d4"],
    ),
]

Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

CompanyHandle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=25,
        pattern=r"^[a-z0-9-]+$",
    ),
]

Salary = Annotated[int, Field(ge=0, description="연봉")]

Equity = Annotated[
    Decimal,
    Field(ge=0, le=1, description="지분율 (0 ~ 1)"),
]
