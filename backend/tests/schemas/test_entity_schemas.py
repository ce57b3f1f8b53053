"""Request schemas — required create fields, optional update fields."""

import pytest
from pydantic import ValidationError

from tienda.schemas.cliente import ClienteCreate, ClienteUpdate
from tienda.schemas.producto import ProductoCreate, ProductoUpdate


def test_producto_create_requires_every_field():
    with pytest.raises(ValidationError):
        ProductoCreate(nombre="Mouse", categoria="Periféricos", precio=19.99)


def test_cliente_create_requires_every_field():
    with pytest.raises(ValidationError):
        ClienteCreate(nombre="Ana", presupuesto=1.0)


def test_producto_create_rejects_non_integer_cantidad():
    with pytest.raises(ValidationError):
        ProductoCreate(nombre="Mouse", categoria="x", precio=1.0, cantidad=2.5)


def test_update_defaults_to_no_present_fields():
    assert ProductoUpdate().present_fields() == {}
    assert ClienteUpdate().present_fields() == {}


def test_update_present_fields_drops_absent_and_null():
    body = ProductoUpdate.model_validate({"precio": 12.0, "nombre": None})
    assert body.present_fields() == {"precio": 12.0}


def test_cliente_update_single_field():
    body = ClienteUpdate.model_validate({"presupuesto": 250.0})
    assert body.present_fields() == {"presupuesto": 250.0}
