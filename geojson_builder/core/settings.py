from dotenv import find_dotenv, load_dotenv
import os


def load_env_file() -> str:
    """Load the first `.env` found from the current working directory upwards. Returns its path, or ''."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)
    return path


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    DEFAULT_DOCUMENT_TYPE: str
    ID_STRATEGY: str
    # Restrict geometry tags to the six leaf geometry types
    STRICT_GEOMETRY_TYPES: bool
    LOG_LEVEL: str

    @classmethod
    def load(cls) -> None:
        cls.DEFAULT_DOCUMENT_TYPE = os.getenv('GEOJSON_DEFAULT_TYPE', 'FeatureCollection')
        cls.ID_STRATEGY = os.getenv('GEOJSON_ID_STRATEGY', 'random')
        cls.STRICT_GEOMETRY_TYPES = _env_flag('GEOJSON_STRICT_GEOMETRY_TYPES', False)
        cls.LOG_LEVEL = os.getenv('GEOJSON_LOG_LEVEL', 'WARNING')


load_env_file()
Settings.load()
