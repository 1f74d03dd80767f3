import os

# Point the engine at an in-memory database before behaviorable.db.database is imported.
os.environ["BEHAVIORABLE_DATABASE_URL"] = os.getenv(
    "BEHAVIORABLE_TEST_DB", "sqlite+pysqlite:///:memory:"
)
