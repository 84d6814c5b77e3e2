import os

os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import itertools
from collections import defaultdict
from typing import Any, Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from fixmanufacture.app import create_app
from fixmanufacture.auth.tokens import TokenService

TEST_SECRET = "test-access-token-secret-0123456789abcdef"


# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


class InMemoryStore:
    """Double de test de DocumentStore: tables en mémoire, filtres d'égalité.
    failures[(operation, table)] = exception à lever pour simuler une panne du store.
    """

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.failures: Dict[tuple, Exception] = {}
        self.writes: List[tuple] = []
        self.initialised = False
        self.closed = False
        self._ids = itertools.count(1)

    def init(self) -> None:
        self.initialised = True

    def close(self) -> None:
        self.closed = True

    def _check(self, op: str, table: str) -> None:
        exc = self.failures.get((op, table))
        if exc is not None:
            raise exc

    @staticmethod
    def _match(doc, filters) -> bool:
        return all(doc.get(k) == v for k, v in (filters or {}).items())

    def find(self, table, filters=None):
        self._check("find", table)
        return [dict(d) for d in self.tables[table] if self._match(d, filters)]

    def find_one(self, table, filters) -> Optional[Dict[str, Any]]:
        rows = self.find(table, filters)
        return rows[0] if rows else None

    def insert(self, table, document):
        self._check("insert", table)
        doc = dict(document)
        doc.setdefault("id", f"{table}-{next(self._ids)}")
        self.tables[table].append(doc)
        self.writes.append(("insert", table))
        return dict(doc)

    def update(self, table, filters, changes):
        self._check("update", table)
        updated = []
        for doc in self.tables[table]:
            if self._match(doc, filters):
                doc.update(changes)
                updated.append(dict(doc))
        self.writes.append(("update", table))
        return updated

    def upsert(self, table, document, on_conflict="id"):
        self._check("upsert", table)
        key = document.get(on_conflict)
        for doc in self.tables[table]:
            if key is not None and doc.get(on_conflict) == key:
                doc.update(document)
                self.writes.append(("upsert", table))
                return dict(doc)
        return self.insert(table, document)

    def delete(self, table, filters):
        self._check("delete", table)
        removed = [d for d in self.tables[table] if self._match(d, filters)]
        self.tables[table] = [d for d in self.tables[table] if not self._match(d, filters)]
        self.writes.append(("delete", table))
        return [dict(d) for d in removed]


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture()
def app(store):
    return create_app(store=store, token_secret=TEST_SECRET)


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_header(tokens):
    def _make(email: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {tokens.issue(email)}"}
    return _make


@pytest.fixture()
def seed_users(store):
    store.tables["users"].extend([
        {"id": "u-admin", "email": "admin@example.com", "role": "admin"},
        {"id": "u-alice", "email": "alice@example.com", "role": "user"},
        {"id": "u-bob", "email": "bob@example.com"},
    ])
    return store
