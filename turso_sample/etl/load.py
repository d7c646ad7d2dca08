import libsql_client
from libsql_client import LibsqlError, Statement

from turso_sample.utils.logger import get_logger

logger = get_logger('load')


def get_local_client(path):
    """Create and return a client for the local SQLite file (created if absent)"""
    try:
        return libsql_client.create_client(f"file:{path}")
    except LibsqlError as e:
        logger.error(f"Error opening local database {path}: {e}")
        raise


async def ensure_table_exists(client, create_sql):
    """Create table if it doesn't exist"""
    try:
        await client.execute(create_sql)
        logger.info("Ensured target table exists")
    except LibsqlError as e:
        logger.error(f"Error creating table: {e}")
        raise


def build_insert_sql(table_name, columns, id_column):
    """
    Build the INSERT statement shared by every sampled row.
    The identifier column is left out so the local table assigns its own.
    """
    insert_columns = [col for col in columns if col.lower() != id_column.lower()]
    if not insert_columns:
        return f"INSERT INTO {table_name} DEFAULT VALUES"

    columns_str = ', '.join(insert_columns)
    placeholders = ', '.join(f':{col}' for col in insert_columns)
    return f"INSERT INTO {table_name} ({columns_str}) VALUES ({placeholders})"


async def load_rows(client, insert_sql, rows, single_transaction=False):
    """
    Insert rows one statement at a time, binding values by column name.
    With single_transaction the inserts are sent as one atomic batch instead.
    Returns the number of rows inserted.
    """
    if not rows:
        logger.info("No rows to load")
        return 0

    inserted = 0
    try:
        if single_transaction:
            await client.batch([Statement(insert_sql, row) for row in rows])
            inserted = len(rows)
        else:
            for row in rows:
                await client.execute(insert_sql, row)
                inserted += 1
    except LibsqlError as e:
        logger.error(f"Error loading row {inserted + 1} of {len(rows)}: {e}")
        raise

    logger.info(f"Loaded {inserted} records")
    return inserted
