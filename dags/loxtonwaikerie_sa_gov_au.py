import logging
from datetime import datetime

from airflow.decorators import dag, task

import pipeline
from utils.strategy_factory import StrategyFactory

default_args = {
    'owner': 'planning-scrapers',
    'retries': 0
}
website_name = 'loxtonwaikerie.sa.gov.au'

strategy_factory = StrategyFactory()
scraper = strategy_factory.get_scraper(website_name)


@dag(
    dag_id=scraper['name'],
    default_args=default_args,
    schedule=scraper['schedule'],
    start_date=datetime(2024, 1, 1),
    catchup=False,
    tags=['planning']
)
def loxtonwaikerie_sa_gov_au():
    @task()
    def scrape_development_applications(**context) -> int:
        """
        Runs the last-month search and one random backfill search, storing new applications.
        :param context: The context of the task.
        :return: The number of applications newly inserted.
        """
        dag_run = context.get('dag_run')
        database = (dag_run.conf or {}).get('database') if dag_run else None
        inserted_count = pipeline.run(website=website_name, database=database, strategy_factory=strategy_factory)
        logging.info(f'Inserted {inserted_count} development application(s) in total')
        return inserted_count

    scrape_development_applications()


loxtonwaikerie_dag = loxtonwaikerie_sa_gov_au()
