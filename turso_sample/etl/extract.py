import libsql_client
from libsql_client import LibsqlError

from turso_sample.errors import SchemaNotFoundError
from turso_sample.utils.logger import get_logger


logger = get_logger('extract')

SCHEMA_QUERY = "SELECT sql FROM sqlite_schema WHERE type = 'table' AND name = ?"


def get_remote_client(config):
    """Create and return a client for the remote database"""
    try:
        return libsql_client.create_client(config['url'], auth_token=config['auth_token'])
    except LibsqlError as e:
        logger.error(f"Error connecting to remote database: {e}")
        raise


async def fetch_table_schema(client, table_name):
    """
    Fetch the CREATE TABLE statement for table_name from the source catalog.
    Only the first matching row is used.
    """
    try:
        result_set = await client.execute(SCHEMA_QUERY, [table_name])
    except LibsqlError as e:
        logger.error(f"Error fetching schema for {table_name}: {e}")
        raise

    if not result_set.rows:
        logger.error(f"No schema found for table {table_name}")
        raise SchemaNotFoundError(table_name)

    create_sql = result_set.rows[0][0]
    logger.info(f"Fetched schema for {table_name}")
    return create_sql


async def fetch_sample_rows(client, table_name, limit):
    """
    Fetch at most `limit` random rows from table_name.
    Returns: list of column names, list of {column: value} dicts
    """
    query = f"""
        SELECT * FROM "{table_name}"
        WHERE rowid IN (
            SELECT rowid FROM "{table_name}" ORDER BY random() LIMIT ?
        )
    """
    try:
        result_set = await client.execute(query, [limit])
    except LibsqlError as e:
        logger.error(f"Error fetching sample from {table_name}: {e}")
        raise

    columns = list(result_set.columns)
    rows = [dict(zip(columns, row)) for row in result_set.rows]

    logger.info(f"Fetched {len(rows)} sample rows (limit {limit}) from {table_name}")
    return columns, rows
