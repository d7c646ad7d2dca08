from turso_sample.utils.logger import get_logger

logger = get_logger('transform')

CREATE_TABLE = 'CREATE TABLE'
CREATE_TABLE_IF_NOT_EXISTS = 'CREATE TABLE IF NOT EXISTS'


def target_table_name(table_name, prefix):
    """Name of the local table: the source name without its prefix"""
    if prefix and table_name.startswith(prefix):
        return table_name[len(prefix):]
    return table_name


def transform_create_table(create_sql, table_name, prefix, quote_chars='`'):
    """
    Rewrite a source CREATE TABLE statement for the local database:
      1. CREATE TABLE -> CREATE TABLE IF NOT EXISTS (first occurrence)
      2. source table name -> name without prefix (first occurrence)
      3. remove every identifier-quoting character
    """
    if CREATE_TABLE_IF_NOT_EXISTS not in create_sql:
        create_sql = create_sql.replace(CREATE_TABLE, CREATE_TABLE_IF_NOT_EXISTS, 1)

    # Search after the keywords; the table name is the first identifier there,
    # so a column sharing the prefix is left alone.
    keyword_end = create_sql.find(CREATE_TABLE_IF_NOT_EXISTS)
    keyword_end = 0 if keyword_end < 0 else keyword_end + len(CREATE_TABLE_IF_NOT_EXISTS)
    head, tail = create_sql[:keyword_end], create_sql[keyword_end:]
    create_sql = head + tail.replace(table_name, target_table_name(table_name, prefix), 1)

    for quote_char in quote_chars:
        create_sql = create_sql.replace(quote_char, '')

    logger.debug(f"Transformed schema for {table_name}: {create_sql}")
    return create_sql


def strip_identifier(row, id_column):
    """Copy of row without the identifier column (matched case-insensitively)"""
    id_column = id_column.lower()
    return {column: value for column, value in row.items() if column.lower() != id_column}


def transform_data(rows, table_name, id_column):
    """Drop the identifier column from every sampled row"""
    transformed = [strip_identifier(row, id_column) for row in rows]
    logger.info(f"Transformed {len(transformed)} records from {table_name}")
    return transformed
