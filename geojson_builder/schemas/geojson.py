from collections.abc import Mapping
from typing import Annotated, Any, Literal
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

Position = tuple[float, float] | tuple[float, float, float]


class _GeoJsonObject(BaseModel):
    # Foreign members are allowed by RFC 7946
    model_config = ConfigDict(extra='allow')


# ----- Geometry Types -----
class Point(_GeoJsonObject):
    type: Literal['Point']
    coordinates: Position

class MultiPoint(_GeoJsonObject):
    type: Literal['MultiPoint']
    coordinates: list[Position]

class LineString(_GeoJsonObject):
    type: Literal['LineString']
    coordinates: list[Position]

class MultiLineString(_GeoJsonObject):
    type: Literal['MultiLineString']
    coordinates: list[list[Position]]

class Polygon(_GeoJsonObject):
    type: Literal['Polygon']
    # Ring closure and minimum length are left to the caller
    coordinates: list[list[Position]]

class MultiPolygon(_GeoJsonObject):
    type: Literal['MultiPolygon']
    coordinates: list[list[list[Position]]]

Geometry = Annotated[
    Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon,
    Field(discriminator='type'),
]

class GeometryCollection(_GeoJsonObject):
    type: Literal['GeometryCollection']
    geometries: list[Geometry]


# ----- Features -----
class Feature(_GeoJsonObject):
    type: Literal['Feature']
    geometry: Annotated[
        Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection,
        Field(discriminator='type'),
    ] | None = None
    properties: dict[str, Any] | None = Field(default=None)
    id: int | str | None = None
    bbox: list[float] | None = None

class FeatureCollection(_GeoJsonObject):
    type: Literal['FeatureCollection']
    features: list[Feature]
    bbox: list[float] | None = None


Document = Annotated[
    FeatureCollection | GeometryCollection | Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon,
    Field(discriminator='type'),
]

_document_adapter: TypeAdapter[Document] = TypeAdapter(Document)


def validate_document(document: Mapping[str, Any]) -> BaseModel:
    """Validate an in-memory GeoJSON object into its typed model. Raises pydantic.ValidationError."""
    return _document_adapter.validate_python(document)


def as_mapping(value: Any) -> Any:
    """Models are dumped to plain dicts; anything else is returned untouched."""
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    return value
