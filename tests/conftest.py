from geojson_builder.builder import GeoJson
from geojson_builder.core.settings import Settings
import pytest


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(Settings, 'DEFAULT_DOCUMENT_TYPE', 'FeatureCollection')
    monkeypatch.setattr(Settings, 'ID_STRATEGY', 'random')
    monkeypatch.setattr(Settings, 'STRICT_GEOMETRY_TYPES', False)
    monkeypatch.setattr(Settings, 'LOG_LEVEL', 'WARNING')


@pytest.fixture
def collection() -> GeoJson:
    return GeoJson()


@pytest.fixture
def point_geometry() -> dict:
    return {'type': 'Point', 'coordinates': [1, 2]}
