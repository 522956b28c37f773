import os

DATA_DIR = os.path.join(os.path.dirname(__file__))

CATALOG_ENV = "PALLETLOAD_CATALOG"


def catalog_csv_path() -> str:
    env_path = os.getenv(CATALOG_ENV)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(DATA_DIR, "catalog.csv")
