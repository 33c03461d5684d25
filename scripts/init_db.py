import logging

from ledger_api.db.engine import get_db_url, get_engine
from ledger_api.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main(drop: bool = False):
    engine = get_engine()
    if drop:
        metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("Ledger schema ready at %s", get_db_url())


if __name__ == "__main__":
    import sys

    main(drop="--drop" in sys.argv[1:])
