from collections.abc import Mapping, Sequence
from geojson_builder.core.constants import LEAF_GEOMETRY_TYPES, LENIENT_GEOMETRY_TYPES
from geojson_builder.core.errors import IllegalGeometryType, MissingGeometryType, NotFeatureCollection
from geojson_builder.core.settings import Settings
from geojson_builder.enums.geojson_type import GeoJsonType
from shapely import Point
from typing import Any
import logging


logger = logging.getLogger(__name__)


def is_feature_collection(geojson: Mapping[str, Any]) -> bool:
    return geojson.get('type') == GeoJsonType.FEATURE_COLLECTION

def is_geometry_collection(geojson: Mapping[str, Any]) -> bool:
    return geojson.get('type') == GeoJsonType.GEOMETRY_COLLECTION

def authorized_geometry_types() -> frozenset[str]:
    if Settings.STRICT_GEOMETRY_TYPES:
        return LEAF_GEOMETRY_TYPES
    return LENIENT_GEOMETRY_TYPES


def ensure_feature_collection(geojson: Mapping[str, Any]) -> None:
    if not is_feature_collection(geojson):
        raise NotFeatureCollection(geojson.get('type'))

def ensure_geometry_type(geometry: Any) -> None:
    if not isinstance(geometry, Mapping) or 'type' not in geometry:
        logger.debug('Rejected geometry without type: %r', geometry)
        raise MissingGeometryType()

    geometry_type = geometry['type']
    if not isinstance(geometry_type, str) or geometry_type not in authorized_geometry_types():
        logger.debug('Rejected geometry type: %r', geometry_type)
        raise IllegalGeometryType(geometry_type)


def planar_distance(from_: Sequence[float], to: Sequence[float]) -> float:
    # Coordinates are treated as plane x/y, no projection involved
    return Point(from_[0], from_[1]).distance(Point(to[0], to[1]))
