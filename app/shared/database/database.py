from __future__ import annotations
# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

Cliente de almacenamiento basado en SQLAlchemy async.

A diferencia de un engine global a nivel de módulo, aquí el engine y la
fábrica de sesiones viven dentro de una instancia de `Database` que
construye el punto de entrada del proceso (lifespan de FastAPI, scripts o
tests) y que se inyecta explícitamente en los servicios.

Provee:
- Database (engine + async_sessionmaker + create_all/dispose/health)
- Dependencia FastAPI: get_async_session (lee request.app.state.db)
- context manager: Database.session_scope()

Notas:
- PostgreSQL vía asyncpg; SQLite vía aiosqlite para desarrollo y pruebas.
- SQLite en memoria usa StaticPool (una única conexión compartida) y
  activa PRAGMA foreign_keys para que los ON DELETE CASCADE funcionen.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.shared.database.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Cliente de almacenamiento: agrupa engine y fábrica de sesiones.

    Uso:
        db = Database(settings.database_url, echo=settings.db_echo_sql)
        await db.create_all()          # solo dev/test
        async with db.session_scope() as session:
            ...
        await db.dispose()
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.engine: AsyncEngine = self._build_engine(url, echo=echo)
        self.sessionmaker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            class_=AsyncSession,
            autoflush=False,
        )

    @staticmethod
    def _build_engine(url: str, *, echo: bool) -> AsyncEngine:
        parsed = make_url(url)
        is_sqlite = parsed.get_backend_name() == "sqlite"

        kwargs: dict = {"echo": echo}
        if is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if parsed.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_pre_ping"] = True

        engine = create_async_engine(url, **kwargs)
        if is_sqlite:
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        logger.info(
            "[DB] engine creado → %s (backend=%s, echo=%s)",
            parsed.render_as_string(hide_password=True),
            parsed.get_backend_name(),
            echo,
        )
        return engine

    async def create_all(self) -> None:
        """Crea las tablas de los modelos registrados en Base.metadata."""
        # Importa los modelos para registrarlos en el metadata
        import app.modules.events.models  # noqa: F401
        import app.modules.registrations.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session_scope(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Sesión para scripts/tests. El commit queda a cargo de quien la usa;
        al salir se hace rollback de cualquier transacción abierta.
        """
        async with self.sessionmaker() as session:
            try:
                yield session
            finally:
                if session.in_transaction():
                    await session.rollback()

    async def check_health(self, timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
        """
        Verifica conectividad a la base de datos.

        Args:
            timeout_s: Tiempo máximo de espera en segundos
            sql: Query SQL a ejecutar (default: "SELECT 1")

        Returns:
            True si la conexión es exitosa, False en caso contrario
        """
        try:
            async with asyncio.timeout(timeout_s):
                async with self.engine.connect() as conn:
                    await conn.execute(text(sql))
            return True
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            logger.warning("[DB] health check fallido: %r", e)
            return False


# ── Dependencia FastAPI
async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    db: Database = request.app.state.db
    async with db.sessionmaker() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


__all__ = [
    "Database",
    "get_async_session",
]
# Fin del archivo backend/app/shared/database/database.py
