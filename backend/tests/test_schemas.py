"""Tests for the wire schemas."""

from schemas import BadRequestProblem, Delivery


def test_delivery_keeps_unknown_fields():
    delivery = Delivery.model_validate({"id": "d1", "address": "1 Main St", "parcels": 2})

    assert Delivery.model_config["extra"] == "allow"
    assert delivery.attributes() == {"address": "1 Main St", "parcels": 2}
    assert delivery.model_dump() == {"id": "d1", "address": "1 Main St", "parcels": 2}


def test_problem_serializes_with_camel_case_aliases():
    problem = BadRequestProblem(
        type="about:blank", title="Invalid id", status=400, message="error.idnull",
        entity_name="delivery", error_key="idnull", params="delivery",
    )

    dumped = problem.model_dump(by_alias=True)

    assert dumped["entityName"] == "delivery"
    assert dumped["errorKey"] == "idnull"
