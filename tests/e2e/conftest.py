"""
Shared fixtures for E2E tests

Provides a real Oracle Database connection and a scratch table for
end-to-end testing. Tests are skipped when no .env is configured.
"""
import pytest
import oracledb
import sys
import os

# Add project root to Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from src.config import load_config, get_db_connection_params

E2E_TABLE = 'ORACLEAI_E2E_DOCS'


@pytest.fixture(scope="session")
def db_params():
    """
    DB connection parameters for E2E tests

    Loads configuration from .env file in project root.
    Scope: session - shared across all tests to avoid repeated loading.
    """
    try:
        load_config()
        return get_db_connection_params()
    except (FileNotFoundError, ValueError) as e:
        pytest.skip(f"E2E database is not configured: {e}")


@pytest.fixture(scope="session")
def db_connection(db_params):
    """
    Real Oracle Database connection

    Creates a connection that persists for the entire test session.
    Automatically closes connection after all tests complete.
    """
    connection = oracledb.connect(**db_params)

    yield connection

    # Cleanup: close connection
    connection.close()


@pytest.fixture
def e2e_table(db_connection):
    """
    Scratch table with two documents

    Creates the table before the test and drops it afterwards.
    Yields (owner, table_name).
    """
    cursor = db_connection.cursor()
    try:
        cursor.execute(f"""
            CREATE TABLE {E2E_TABLE} (
                ID NUMBER,
                AUTHOR VARCHAR2(100),
                BODY CLOB
            )
        """)
        cursor.executemany(
            f"INSERT INTO {E2E_TABLE} (ID, AUTHOR, BODY) VALUES (:1, :2, :3)",
            [
                (1, 'Alice', 'Oracle Database stores vectors natively.'),
                (2, 'Bob', 'Documents are loaded row by row.'),
            ]
        )
        db_connection.commit()

        cursor.execute("SELECT USER FROM dual")
        owner = cursor.fetchone()[0]
    finally:
        cursor.close()

    yield owner, E2E_TABLE

    cursor = db_connection.cursor()
    try:
        cursor.execute(f"DROP TABLE {E2E_TABLE} PURGE")
    except Exception as e:
        print(f"Warning: Cleanup failed: {e}")
    finally:
        cursor.close()
