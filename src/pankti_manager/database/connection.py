from __future__ import annotations

from dataclasses import dataclass

import mysql.connector
from mysql.connector.constants import ClientFlag


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "pankti_db"

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        defaults = cls()
        return cls(
            host=str(db_config.get("host") or defaults.host),
            port=int(db_config.get("port") or defaults.port),
            user=str(db_config.get("user") or defaults.user),
            password=str(db_config.get("password") or ""),
            database=str(db_config.get("database") or defaults.database),
        )


class DatabaseConnection:
    """Hands out short-lived MySQL connections for one database.

    Repositories open a connection per call and close it afterwards, so a
    single instance is shared by all of them.
    """

    def __init__(self, config: DBConfig):
        self.config = config

    @classmethod
    def from_dict(cls, db_config: dict) -> "DatabaseConnection":
        return cls(DBConfig.from_dict(db_config))

    def connect(self, *, select_database: bool = True):
        """Open a new connection.

        With ``select_database=False`` no default schema is selected, which
        is what creating the database itself needs.
        """

        kwargs = dict(
            host=self.config.host,
            port=self.config.port,
            user=self.config.user,
            password=self.config.password,
            charset="utf8mb4",
            # UPDATE rowcount reports matched rows, not only changed ones.
            client_flags=[ClientFlag.FOUND_ROWS],
        )
        if select_database:
            kwargs["database"] = self.config.database
        return mysql.connector.connect(**kwargs)
