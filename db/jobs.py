"""jobs 테이블 CRUD

모든 함수는 호출자가 획득한 asyncpg 커넥션을 첫 인자로 받는다.
"""
import logging
import uuid
from typing import Any, Mapping

import asyncpg
from pydantic import TypeAdapter, ValidationError

from schemas.commons import JobId
from schemas.job import JobCreateRequest, JobDetail, JobFilterQuery
from utils.errors import BadRequestError, ConflictError, NotFoundError
from utils.query import build_set_clause

logger = logging.getLogger(__name__)

# payload 필드명 -> 컬럼명 (나머지는 필드명 그대로)
JOB_COLUMN_MAP = {
    "companyHandle": "company_handle",
}

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

_job_id_adapter = TypeAdapter(JobId)


def escape_like(text: str) -> str:
    """LIKE 와일드카드(%, _)와 이스케이프 문자를 일반 문자로"""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def create_job(
        conn: asyncpg.Connection, job: JobCreateRequest, job_id: str | None = None) -> JobDetail:
    """채용공고 생성 (id 형식이 틀리면 400, 같은 id가 있으면 409)"""
    if job_id is None:
        job_id = f"job_{uuid.uuid4().hex}"
    else:
        try:
            job_id = _job_id_adapter.validate_python(job_id)
        except ValidationError:
            raise BadRequestError(f"Invalid job id: {job_id}") from None

    duplicate = await conn.fetchrow(
        """
        SELECT id
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )
    if duplicate:
        logger.warning("Duplicate job: %s", job_id)
        raise ConflictError(f"Duplicate job: {job_id}")

    # 확인과 INSERT 사이에 같은 id가 먼저 들어온 경우
    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO jobs (id, title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {JOB_COLUMNS}
            """,
            job_id,
            job.title,
            job.salary,
            job.equity,
            job.company_handle,
        )
    except asyncpg.UniqueViolationError:
        logger.warning("Duplicate job: %s", job_id)
        raise ConflictError(f"Duplicate job: {job_id}") from None
    logger.info("Job created: %s", job_id)
    return JobDetail.model_validate(dict(row))


async def find_all_jobs(conn: asyncpg.Connection) -> list[JobDetail]:
    rows = await conn.fetch(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        ORDER BY title
        """
    )
    return [JobDetail.model_validate(dict(row)) for row in rows]


async def filter_jobs(conn: asyncpg.Connection, query: JobFilterQuery) -> list[JobDetail]:
    """
    조건 검색
    - title: 부분 일치 (대소문자 무시)
    - min_salary / max_salary: 연봉 범위
    - has_equity: 지분 있는 공고만
    """
    if (query.min_salary is not None and query.max_salary is not None
            and query.min_salary > query.max_salary):
        raise BadRequestError("min_salary cannot be greater than max_salary")

    where_parts = []
    params: list[Any] = []

    if query.title:
        params.append(f"%{escape_like(query.title)}%")
        where_parts.append(f"title ILIKE ${len(params)} ESCAPE '\\'")
    if query.min_salary is not None:
        params.append(query.min_salary)
        where_parts.append(f"salary >= ${len(params)}")
    if query.max_salary is not None:
        params.append(query.max_salary)
        where_parts.append(f"salary <= ${len(params)}")
    if query.has_equity:
        where_parts.append("equity > 0")

    where_clause = f"WHERE {' AND '.join(where_parts)}" if where_parts else ""

    rows = await conn.fetch(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        {where_clause}
        ORDER BY title
        """,
        *params,
    )
    return [JobDetail.model_validate(dict(row)) for row in rows]


async def get_job(conn: asyncpg.Connection, job_id: str) -> JobDetail:
    row = await conn.fetchrow(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )
    if row is None:
        logger.info("Job not found: %s", job_id)
        raise NotFoundError(f"No job: {job_id}")
    return JobDetail.model_validate(dict(row))


async def update_job(conn: asyncpg.Connection, job_id: str, data: Mapping[str, Any]) -> JobDetail:
    """
    부분 수정: data에 있는 필드만 변경

    data 키는 camelCase 필드명 (JobUpdateRequest.to_payload())
    """
    set_clause, values = build_set_clause(data, JOB_COLUMN_MAP)
    id_placeholder = f"${len(values) + 1}"

    row = await conn.fetchrow(
        f"""
        UPDATE jobs
        SET {set_clause}
        WHERE id = {id_placeholder}
        RETURNING {JOB_COLUMNS}
        """,
        *values,
        job_id,
    )
    if row is None:
        logger.info("Update target not found: %s", job_id)
        raise NotFoundError(f"No job: {job_id}")
    return JobDetail.model_validate(dict(row))


async def remove_job(conn: asyncpg.Connection, job_id: str) -> None:
    row = await conn.fetchrow(
        """
        DELETE
        FROM jobs
        WHERE id = $1
        RETURNING id
        """,
        job_id,
    )
    if row is None:
        logger.info("Delete target not found: %s", job_id)
        raise NotFoundError(f"No job: {job_id}")
