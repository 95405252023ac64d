from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from schemas.commons import CompanyHandle, Equity, Salary, Title


class JobBase(BaseModel):
    """camelCase 필드명으로 주고받는 기본 스키마"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobDetail(JobBase):
    """DB 행 그대로 (저장된 값은 다시 검증하지 않음)"""
    id: str
    title: str
    salary: int | None = None
    equity: Decimal | None = None
    company_handle: str


class JobCreateRequest(JobBase):
    model_config = ConfigDict(extra='forbid')

    title: Title
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle


class JobUpdateRequest(JobBase):
    model_config = ConfigDict(extra='forbid')

    title: Title | None = None
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle | None = None

    @model_validator(mode='after')
    def check_at_least_one_field(self):
        """
        "미전송"과 "명시적 null 전송"을 구분하기 위해
        model_fields_set 기준으로 검사 (salary, equity는 null 허용)
        """
        if not self.model_fields_set:
            raise ValueError("최소 하나의 필드는 입력 해야 합니다")

        for field in ("title", "company_handle"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field}은 null로 설정할 수 없습니다.")
        return self

    def to_payload(self) -> dict[str, Any]:
        """보낸 필드만 camelCase 키로 (부분 수정 payload)"""
        return self.model_dump(exclude_unset=True, by_alias=True)


class JobFilterQuery(BaseModel):
    model_config = ConfigDict(extra='forbid')

    title: Title | None = None
    min_salary: Salary | None = None
    max_salary: Salary | None = None
    has_equity: bool = False
