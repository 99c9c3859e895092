from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from taskboard.adapter.services.mail_transport import SmtpMailTransport
from taskboard.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskboard.api.error import ClientError
from taskboard.api.utils.jwt import verify_jwt
from taskboard.app.services.mail_transport import IMailTransport
from taskboard.libs.result import Error


def configure_sqlite(engine: AsyncEngine) -> AsyncEngine:
    """
    Enforce foreign keys (cascading deletes live in the schema) and let
    SQLAlchemy emit BEGIN itself so SAVEPOINTs nest inside the request
    transaction. No-op for other backends.
    """
    if engine.url.get_backend_name() != "sqlite":
        return engine

    def on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    def on_begin(connection):
        connection.exec_driver_sql("BEGIN")

    event.listen(engine.sync_engine, "connect", on_connect)
    event.listen(engine.sync_engine, "begin", on_begin)
    return engine


engine = configure_sqlite(
    create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header, if any

    Returns:
        Decoded JWT payload containing user_id and, when known, email

    Raises:
        ClientError: 401 UNAUTHENTICATED if the token is missing, invalid or expired
    """
    payload = verify_jwt(credentials.credentials) if credentials else None

    if payload is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload


def get_mail_transport() -> IMailTransport:
    return SmtpMailTransport(
        server=ApplicationConfig.MAIL_SERVER,
        port=ApplicationConfig.MAIL_PORT,
        use_tls=ApplicationConfig.MAIL_USE_TLS,
        username=ApplicationConfig.MAIL_USERNAME or None,
        password=ApplicationConfig.MAIL_PASSWORD or None,
        default_sender=ApplicationConfig.MAIL_DEFAULT_SENDER,
    )
