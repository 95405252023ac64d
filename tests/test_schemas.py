from decimal import Decimal

import pytest
from pydantic import ValidationError

from schemas.job import JobCreateRequest, JobDetail, JobFilterQuery, JobUpdateRequest


class TestJobCreateRequest:
    def test_camel_case_alias(self):
        request = JobCreateRequest.model_validate({"title": "Engineer", "companyHandle": "acme"})

        assert request.company_handle == "acme"
        assert request.salary is None

    def test_extra_field_forbidden(self):
        with pytest.raises(ValidationError):
            JobCreateRequest.model_validate(
                {"title": "Engineer", "companyHandle": "acme", "role": "admin"}
            )

    @pytest.mark.parametrize("equity", ["1.5", "-0.1"])
    def test_equity_range(self, equity):
        with pytest.raises(ValidationError):
            JobCreateRequest(title="Engineer", company_handle="acme", equity=equity)

    def test_negative_salary(self):
        with pytest.raises(ValidationError):
            JobCreateRequest(title="Engineer", company_handle="acme", salary=-1)

    def test_invalid_company_handle(self):
        with pytest.raises(ValidationError):
            JobCreateRequest(title="Engineer", company_handle="Acme Corp")


class TestJobUpdateRequest:
    """PATCH payload 검증"""

    def test_no_fields(self):
        with pytest.raises(ValidationError):
            JobUpdateRequest()

    def test_null_title(self):
        with pytest.raises(ValidationError):
            JobUpdateRequest(title=None)

    def test_null_company_handle(self):
        with pytest.raises(ValidationError):
            JobUpdateRequest.model_validate({"companyHandle": None})

    def test_null_salary_allowed(self):
        """salary는 null로 지울 수 있음"""
        request = JobUpdateRequest(salary=None)

        assert request.to_payload() == {"salary": None}

    def test_payload_only_sent_fields(self):
        request = JobUpdateRequest.model_validate({"companyHandle": "globex", "title": " Lead "})

        assert request.to_payload() == {"title": "Lead", "companyHandle": "globex"}

    def test_payload_keeps_decimal(self):
        request = JobUpdateRequest(equity="0.25")

        assert request.to_payload() == {"equity": Decimal("0.25")}


class TestJobFilterQuery:
    def test_defaults(self):
        query = JobFilterQuery()

        assert query.title is None
        assert query.has_equity is False

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            JobFilterQuery(title="   ")


class TestJobDetail:
    def test_from_row(self):
        job = JobDetail.model_validate({
            "id": "job_ab12",
            "title": "Engineer",
            "salary": 100,
            "equity": Decimal("0"),
            "companyHandle": "acme",
        })

        assert job.model_dump(by_alias=True) == {
            "id": "job_ab12",
            "title": "Engineer",
            "salary": 100,
            "equity": Decimal("0"),
            "companyHandle": "acme",
        }

    def test_missing_required(self):
        with pytest.raises(ValidationError):
            JobDetail(id="job_ab12", title="Engineer")
