"""

데모 데이터 생성 스크립트.

- 개발 서버 최초 세팅 시 한 번 실행하는 용도
- .env 의 DATABASE_URL 에 연결하여 데모 회원 / 회원권 / 칩을 생성한다.
- 이미 회원이 존재하면 생성하지 않고 종료한다.

사용 방법
- 가상환경 접속
- (.venv) ~$ alembic upgrade head
- (.venv) ~$ python -m scripts.seed_demo_data

"""

from dotenv import load_dotenv
load_dotenv()

from gym_api.db.seed import seed_demo_data
from gym_api.db.session import SessionLocal


def main():
    db = SessionLocal()
    try:
        if seed_demo_data(db):
            print("🚀 Demo data created (members 101/102, memberships 201/202, chips 301/302)")
        else:
            print("✅ Members already exist. Skip seeding.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
