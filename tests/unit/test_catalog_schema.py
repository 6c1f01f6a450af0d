# ABOUTME: Unit tests for catalog schema creation and connection management.
# ABOUTME: Validates tables, nullability, the users bootstrap, and reopen idempotence.

import sqlite3
from pathlib import Path

import pytest

from livraria.db.connection import open_catalog


def _columns(conn: sqlite3.Connection, table: str) -> dict[str, bool]:
    """Map column name to its NOT NULL flag."""
    return {row[1]: bool(row[3]) for row in conn.execute(f"PRAGMA table_info({table})")}


class TestOpenCatalog:
    """Tests for the open_catalog() connection factory."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        nested = tmp_path / "deep" / "nested" / "catalog.db"
        conn = open_catalog(nested)
        conn.close()
        assert nested.exists()

    def test_entity_tables(self, db_path: Path) -> None:
        conn = open_catalog(db_path)
        assert _columns(conn, "autores") == {"id": False, "nome": True, "nacionalidade": False}
        assert _columns(conn, "generos") == {"id": False, "nome": True}
        assert _columns(conn, "editoras") == {"id": False, "nome": True, "pais_origem": False}
        conn.close()

    def test_livros_table(self, db_path: Path) -> None:
        conn = open_catalog(db_path)
        columns = set(_columns(conn, "livros"))
        conn.close()
        assert columns == {
            "id",
            "titulo",
            "sinopse",
            "ano_publicacao",
            "numero_paginas",
            "isbn",
            "idioma_origem",
            "autor_id",
            "genero_id",
            "editora_id",
        }

    def test_usuarios_bootstrap(self, db_path: Path) -> None:
        conn = open_catalog(db_path)
        assert set(_columns(conn, "usuarios")) == {"id", "nome", "email", "data_cadastro"}
        conn.close()

    def test_entity_names_unique(self, db_path: Path) -> None:
        conn = open_catalog(db_path)
        conn.execute("INSERT INTO generos (nome) VALUES ('Romance')")
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute("INSERT INTO generos (nome) VALUES ('Romance')")
        conn.close()

    def test_foreign_keys_enforced(self, db_path: Path) -> None:
        conn = open_catalog(db_path)
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO livros (titulo, autor_id, genero_id, editora_id) "
                "VALUES ('Órfão', 99, 99, 99)"
            )
        conn.close()

    def test_autocommit_mode(self, db_path: Path) -> None:
        """Statements are committed without an explicit commit()."""
        conn = open_catalog(db_path)
        conn.execute("INSERT INTO generos (nome) VALUES ('Poesia')")
        assert not conn.in_transaction
        conn.close()

        conn = open_catalog(db_path)
        assert conn.execute("SELECT COUNT(*) FROM generos").fetchone()[0] == 1
        conn.close()

    def test_reopen_keeps_data_and_schema_version(self, db_path: Path) -> None:
        conn = open_catalog(db_path)
        conn.execute("INSERT INTO autores (nome) VALUES ('Clarice Lispector')")
        conn.close()

        conn = open_catalog(db_path)
        assert conn.execute("SELECT nome FROM autores").fetchone()["nome"] == "Clarice Lispector"
        versions = conn.execute("SELECT version FROM schema_version").fetchall()
        conn.close()
        assert [row[0] for row in versions] == [1]
