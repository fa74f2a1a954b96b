# storefront/data/database.py
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from storefront.domain.errors import DatabaseUnavailableError
from storefront.utils.retry import db_retry
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


class Database:
    """
    Jawny uchwyt do bazy:
    - tworzony przy starcie procesu (create_app / lifespan)
    - connect() sprawdza polaczenie z retry
    - dispose() zamyka pule przy shutdown
    """

    def __init__(self, url: str, engine: Engine | None = None, **engine_kwargs):
        self.url = url
        self.engine = engine or create_engine(url, pool_pre_ping=True, future=True, **engine_kwargs)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        self.available = False

    @db_retry()
    def _ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def connect(self) -> bool:
        try:
            self._ping()
        except OperationalError as e:
            logger.warning(f"[Database] Failed to connect: {e}")
            self.available = False
            return False

        logger.info(f"[Database] Connected ({self.engine.url.get_backend_name()})")
        self.available = True
        return True

    def create_all(self) -> None:
        # import modeli zeby zarejestrowaly sie w Base.metadata
        import storefront.data.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")

    def dispose(self) -> None:
        self.engine.dispose()
        self.available = False
        logger.info("[Database] Connection pool disposed")

    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """acquire -> commit przy sukcesie -> rollback przy kazdym bledzie"""
    try:
        yield db
        db.commit()
    except OperationalError as e:
        db.rollback()
        logger.error(f"[Database] Write failed, rolled back: {e}")
        raise DatabaseUnavailableError() from e
    except Exception:
        db.rollback()
        raise


def soft_read(default_factory: Callable[[], object]):
    """
    Odczyt degraduje sie do pustego wyniku gdy baza jest niedostepna.
    Zapisy nie uzywaja tego dekoratora - one rzucaja blad.
    """

    def decorator(fn):
        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            try:
                return fn(self, *args, **kwargs)
            except OperationalError as e:
                logger.warning(f"[Database] Cannot {fn.__name__}: database not available ({e.orig})")
                self.db.rollback()
                return default_factory()

        return wrapper

    return decorator
