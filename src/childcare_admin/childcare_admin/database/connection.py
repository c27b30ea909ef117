from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from mysql.connector import errors, pooling

log = logging.getLogger(__name__)

POOL_RETRY_INTERVAL = 0.05


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 5
    pool_timeout: float = 10.0

    @classmethod
    def from_dict(cls, db_config: dict, *, pool_size: int = 5, pool_timeout: float = 10.0) -> "DBConfig":
        return cls(
            host=str(db_config["host"]),
            port=int(db_config.get("port", 3306)),
            user=str(db_config["user"]),
            password=str(db_config["password"]),
            database=str(db_config["database"]),
            pool_size=int(pool_size),
            pool_timeout=float(pool_timeout),
        )


class DatabaseConnection:
    """Connection pool owned by the application container.

    Created once by ``build_container`` at startup and released with ``close()``
    on shutdown. Connections handed out by ``connect()`` go back to the pool when
    closed.

    Each request holds at most one connection for the length of a ``db_cursor``
    block, so ``pool_size`` bounds how many requests touch MySQL at the same
    time. When every connection is checked out, ``connect()`` waits up to
    ``pool_timeout`` seconds for one to come back before giving up.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    def open(self) -> "DatabaseConnection":
        if self._pool is None:
            self._pool = pooling.MySQLConnectionPool(
                pool_name="childcare_admin",
                pool_size=self._config.pool_size,
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
            log.info(
                "Opened MySQL pool %s@%s:%s/%s (size=%s)",
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
                self._config.pool_size,
            )
        return self

    def connect(self):
        if self._pool is None:
            self.open()

        # get_connection() raises instead of blocking when the pool is exhausted.
        deadline = time.monotonic() + self._config.pool_timeout
        while True:
            try:
                return self._pool.get_connection()
            except errors.PoolError:
                if time.monotonic() >= deadline:
                    log.error("MySQL pool exhausted for %.1fs (size=%s)", self._config.pool_timeout, self._config.pool_size)
                    raise
                time.sleep(POOL_RETRY_INTERVAL)

    def close(self) -> None:
        if self._pool is None:
            return
        # Idle connections are closed; checked-out ones close when returned.
        # _remove_connections is private; present in mysql-connector-python 8.0 through 9.x.
        self._pool._remove_connections()
        self._pool = None
        log.info("Closed MySQL pool")
