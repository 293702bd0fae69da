from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from facerec.config.settings import get_settings

settings = get_settings()

# sqlite só aceita a conexão na thread que a criou, a não ser com esta flag
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    connect_args=connect_args,
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
