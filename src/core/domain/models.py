"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validamos la forma de la respuesta GraphQL en el borde; si el shape no es
  el esperado obtenemos un `ValidationError` en lugar de un acceso a campo
  inexistente a mitad del pipeline.

Nota:
- Los modelos `*Node`/`*Connection` reflejan el wrapper edge/node de GraphQL.
  El resto del Core solo trabaja con `Product` y `VariantRecord`.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


class ProductQuery(BaseModel):
    """Parámetros de la búsqueda (inmutables)."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="Título (o fragmento) de producto a buscar.",
    )


class MoneyNode(BaseModel):
    model_config = ConfigDict(extra="ignore")

    amount: str = Field(..., description="Importe decimal tal cual lo envía la API.")

    @field_validator("amount")
    @classmethod
    def _amount_is_decimal(cls, value: str) -> str:
        # Solo decimales finitos: nada de "NaN", "inf" ni "1_000".
        if not _DECIMAL_RE.fullmatch(value) or not math.isfinite(float(value)):
            raise ValueError(f"not a finite decimal amount: {value!r}")
        return value


class VariantNode(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    price: MoneyNode


class VariantEdge(BaseModel):
    model_config = ConfigDict(extra="ignore")

    node: VariantNode


class VariantConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    edges: list[VariantEdge] = Field(default_factory=list)


class Product(BaseModel):
    """Producto devuelto por la Storefront API (primeras 100 variantes)."""

    model_config = ConfigDict(extra="ignore")

    title: str
    variants: VariantConnection = Field(default_factory=VariantConnection)


class ProductEdge(BaseModel):
    model_config = ConfigDict(extra="ignore")

    node: Product


class ProductConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    edges: list[ProductEdge] = Field(default_factory=list)


class ProductsData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    products: ProductConnection


class ProductsResponse(BaseModel):
    """Cuerpo completo de la respuesta: `{"data": {"products": ...}}`."""

    model_config = ConfigDict(extra="ignore")

    data: ProductsData

    def product_nodes(self) -> list[Product]:
        return [edge.node for edge in self.data.products.edges]


class VariantRecord(BaseModel):
    """Variante aplanada: la única entidad que se ordena y se muestra."""

    model_config = ConfigDict(frozen=True)

    product_title: str = Field(..., description="Título del producto padre.")
    variant_title: str = Field(..., description="Título de la variante (talla, color...).")
    price: float = Field(..., description="Precio parseado desde `price.amount`.")
