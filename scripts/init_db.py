"""jobs 테이블 생성 + 테스트 데이터 스크립트

사용법:
    python scripts/init_db.py          # 테이블만 생성
    python scripts/init_db.py --seed   # 샘플 채용공고까지 생성
"""
import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

import asyncpg

from config import settings
from db.base import Base
from db.jobs import create_job
from db.models import job  # noqa: F401  (metadata 등록)
from db.session import engine
from schemas.job import JobCreateRequest

SAMPLE_JOBS = [
    JobCreateRequest(title="Backend Engineer", salary=90000, equity="0.01", company_handle="acme"),
    JobCreateRequest(title="Data Analyst", salary=70000, equity="0", company_handle="acme"),
    JobCreateRequest(title="Site Reliability Engineer", salary=110000, company_handle="globex"),
]


async def create_tables():
    """ORM 메타데이터 기준으로 테이블 생성"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def seed_jobs():
    conn = await asyncpg.connect(
        host=settings.db_host,
        port=settings.db_port,
        user=settings.db_user,
        password=settings.db_password,
        database=settings.db_name,
    )
    try:
        return [await create_job(conn, sample) for sample in SAMPLE_JOBS]
    finally:
        await conn.close()


async def main(seed: bool):
    await create_tables()
    print("✅ jobs 테이블 생성 완료!")

    if seed:
        jobs = await seed_jobs()
        print(f"\n📁 샘플 채용공고 {len(jobs)}건:")
        for created in jobs:
            print(f"   - {created.id}: {created.title} ({created.company_handle})")


if __name__ == "__main__":
    asyncio.run(main(seed="--seed" in sys.argv[1:]))
