import asyncio

from turso_sample.config.settings import load_config
from turso_sample.etl.extract import get_remote_client, fetch_table_schema, fetch_sample_rows
from turso_sample.etl.transform import target_table_name, transform_create_table, transform_data
from turso_sample.etl.load import get_local_client, ensure_table_exists, build_insert_sql, load_rows
from turso_sample.utils.logger import get_logger, set_log_level

logger = get_logger('main')


async def migrate_sample(remote_config, sample_config):
    """Copy a random sample of the source table into the local database"""
    source_table = sample_config['source_table']
    prefix = sample_config['table_prefix']
    id_column = sample_config['id_column']
    target_table = target_table_name(source_table, prefix)

    logger.info(f"Starting sample of {source_table} into {sample_config['local_db_path']} ({target_table})")

    async with get_remote_client(remote_config) as remote, \
            get_local_client(sample_config['local_db_path']) as local:
        create_sql = await fetch_table_schema(remote, source_table)
        create_sql = transform_create_table(create_sql, source_table, prefix, sample_config['quote_chars'])

        columns, rows = await fetch_sample_rows(remote, source_table, sample_config['sample_limit'])
        rows = transform_data(rows, source_table, id_column)

        # Load
        await ensure_table_exists(local, create_sql)
        insert_sql = build_insert_sql(target_table, columns, id_column)
        inserted = await load_rows(local, insert_sql, rows, sample_config['single_transaction'])

    logger.info(f"Finished copying {inserted} records from {source_table} to {target_table}")
    return inserted


def main():
    """Main function to run the sampling pipeline"""
    try:
        config = load_config()
        set_log_level(config['log_level'])

        logger.info("Starting sample copy from remote database")
        asyncio.run(migrate_sample(config['remote'], config['sample']))
        logger.info("Sample copy completed successfully")
    except Exception as e:
        logger.error(f"Error in main process: {e}")
        raise


if __name__ == "__main__":
    main()
