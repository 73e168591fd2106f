from collections.abc import Mapping, Sequence
from geojson_builder.core.ids import IdGenerator, get_id_generator, random_id
from geojson_builder.core.settings import Settings
from geojson_builder.enums.geojson_type import GeoJsonType
from geojson_builder.schemas.geojson import as_mapping, validate_document
from geojson_builder.utils import (
    ensure_feature_collection, ensure_geometry_type, is_feature_collection, is_geometry_collection, planar_distance
)
from pydantic import BaseModel
from typing import Any
import logging


logger = logging.getLogger(__name__)


def _same_id(feature_id: Any, id: Any) -> bool:
    # Strict match: True and 1.0 are not the id 1
    return type(feature_id) is type(id) and feature_id == id


class GeoJson:
    """
    Holds a single in-memory GeoJSON document and mutates it in place.

    The document shape is chosen once from `type`: a FeatureCollection, a
    GeometryCollection, or any other string as a single geometry with empty
    coordinates. Feature operations only work on a FeatureCollection.
    """

    def __init__(self, type: str | None = None, id_generator: IdGenerator | None = None):
        if type is None:
            type = Settings.DEFAULT_DOCUMENT_TYPE
        self.geojson: dict[str, Any] = self._new_document(type)
        self._id_generator = id_generator or get_id_generator(Settings.ID_STRATEGY)

    @staticmethod
    def _new_document(type: str) -> dict[str, Any]:
        if type == GeoJsonType.FEATURE_COLLECTION:
            return {'type': 'FeatureCollection', 'features': []}
        if type == GeoJsonType.GEOMETRY_COLLECTION:
            return {'type': 'GeometryCollection', 'geometries': []}
        # Not checked against the geometry vocabulary
        return {'type': type, 'coordinates': []}

    def add(self, elements: Sequence[Any]) -> dict[str, Any]:
        """
        Bulk insert, depending on the document type:

        - FeatureCollection: every element's geometry and properties are added as a new feature.
          All elements are validated before any is appended.
        - GeometryCollection: the geometries are replaced by `elements`.
        - single geometry: the document is replaced by `elements[0]` (IndexError when empty).
        """
        if is_feature_collection(self.geojson):
            pending = []
            for element in map(as_mapping, elements):
                geometry = as_mapping(element.get('geometry'))
                ensure_geometry_type(geometry)
                pending.append((geometry, element.get('properties')))
            for geometry, properties in pending:
                self._append_feature(geometry, properties)
        elif is_geometry_collection(self.geojson):
            self.geojson['geometries'] = [as_mapping(element) for element in elements]
            logger.debug('Replaced geometries with %d element(s)', len(self.geojson['geometries']))
        else:
            replacement = as_mapping(elements[0])
            new_type = replacement.get('type') if isinstance(replacement, Mapping) else None
            if new_type != self.geojson['type']:
                logger.warning('Replacing %s document with %s', self.geojson['type'], new_type)
            self.geojson = replacement
        return self.geojson

    def add_feature(self, geometry: Mapping[str, Any] | BaseModel, properties: dict[str, Any] | None = None) -> 'GeoJson':
        ensure_feature_collection(self.geojson)
        geometry = as_mapping(geometry)
        ensure_geometry_type(geometry)
        self._append_feature(geometry, properties)
        return self

    def _append_feature(self, geometry: Mapping[str, Any], properties: dict[str, Any] | None) -> None:
        feature = {
            'type': 'Feature',
            'id': self._id_generator(),
            'properties': {} if properties is None else properties,
            'geometry': geometry,
        }
        self.geojson['features'].append(feature)
        logger.debug('Added feature %s (%s)', feature['id'], geometry['type'])

    def remove_feature(self, id: int) -> 'GeoJson':
        ensure_feature_collection(self.geojson)
        features = self.geojson['features']
        for i, feature in enumerate(features):
            if _same_id(feature.get('id'), id):
                del features[i]
                logger.debug('Removed feature %s', id)
                break
        else:
            logger.debug('No feature to remove with id %s', id)
        return self

    def update_feature(self, id: int, feature: Mapping[str, Any] | BaseModel) -> 'GeoJson':
        ensure_feature_collection(self.geojson)
        feature = as_mapping(feature)
        ensure_geometry_type(as_mapping(feature.get('geometry')))

        features = self.geojson['features']
        replaced = 0
        for i, element in enumerate(features):
            if _same_id(element.get('id'), id):
                features[i] = feature
                replaced += 1
        logger.debug('Updated %d feature(s) with id %s', replaced, id)
        return self

    # ----- Construction helpers -----
    @staticmethod
    def feature(geometry: Any, properties: Any) -> dict[str, Any]:
        return {'type': 'Feature', 'properties': properties, 'geometry': geometry}

    @staticmethod
    def point(coordinates: Any) -> dict[str, Any]:
        return {'type': 'Point', 'coordinates': coordinates}

    @staticmethod
    def multi_point(coordinates: Any) -> dict[str, Any]:
        return {'type': 'MultiPoint', 'coordinates': coordinates}

    @staticmethod
    def line_string(coordinates: Any) -> dict[str, Any]:
        return {'type': 'LineString', 'coordinates': coordinates}

    @staticmethod
    def multi_line_string(coordinates: Any) -> dict[str, Any]:
        return {'type': 'MultiLineString', 'coordinates': coordinates}

    @staticmethod
    def polygon(coordinates: Any) -> dict[str, Any]:
        return {'type': 'Polygon', 'coordinates': coordinates}

    @staticmethod
    def multi_polygon(coordinates: Any) -> dict[str, Any]:
        return {'type': 'MultiPolygon', 'coordinates': coordinates}

    # ----- Queries -----
    def get_type(self) -> str | None:
        return self.geojson.get('type')

    @staticmethod
    def get_distance_in_pixels(from_: Sequence[float], to: Sequence[float]) -> float:
        return planar_distance(from_, to)

    @staticmethod
    def random_id() -> int:
        return random_id()

    def to_model(self) -> BaseModel:
        """Typed view of the current document. Raises pydantic.ValidationError when malformed."""
        return validate_document(self.geojson)
