# ABOUTME: SQL DDL statements for the Livraria catalog database schema.
# ABOUTME: Defines the deduplicated entity tables, the books table, and the users bootstrap.

SCHEMA_V1 = """
-- Deduplicated entities referenced by books
CREATE TABLE autores (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    nome           TEXT NOT NULL UNIQUE,
    nacionalidade  TEXT
);

CREATE TABLE generos (
    id    INTEGER PRIMARY KEY AUTOINCREMENT,
    nome  TEXT NOT NULL UNIQUE
);

CREATE TABLE editoras (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    nome         TEXT NOT NULL UNIQUE,
    pais_origem  TEXT
);

-- Books; duplicate titles and ISBNs are allowed
CREATE TABLE livros (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    titulo          TEXT NOT NULL,
    sinopse         TEXT,
    ano_publicacao  INTEGER,
    numero_paginas  INTEGER,
    isbn            TEXT,
    idioma_origem   TEXT,
    autor_id        INTEGER NOT NULL REFERENCES autores(id),
    genero_id       INTEGER NOT NULL REFERENCES generos(id),
    editora_id      INTEGER NOT NULL REFERENCES editoras(id)
);

CREATE INDEX idx_livros_autor ON livros(autor_id);
CREATE INDEX idx_livros_isbn ON livros(isbn) WHERE isbn IS NOT NULL;

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""

# Applied on every open, independent of the catalog schema.
USERS_BOOTSTRAP = """
CREATE TABLE IF NOT EXISTS usuarios (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    nome           TEXT NOT NULL,
    email          TEXT NOT NULL UNIQUE,
    data_cadastro  TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);
"""

CATALOG_TABLES = ("autores", "generos", "editoras", "livros", "usuarios")
