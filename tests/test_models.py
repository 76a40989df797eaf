import pytest
from pydantic import ValidationError

from responder import InvalidStatusCodeError, Item, SuccessResponse


def test_setters_chain():
    response = SuccessResponse(data=Item(data={"id": 1})).set_status(202).set_meta({"a": 1})
    assert response.status == 202
    assert response.meta == {"a": 1}


@pytest.mark.parametrize("status", [100, 302, 404, 500])
def test_non_success_status_rejected(status):
    response = SuccessResponse(data=Item())
    with pytest.raises(InvalidStatusCodeError):
        response.set_status(status)
    assert response.status == 200


def test_invalid_status_is_value_error():
    with pytest.raises(ValueError):
        SuccessResponse(data=Item()).set_status(418)


def test_constructor_rejects_non_success_status():
    with pytest.raises(ValidationError) as excinfo:
        SuccessResponse(data=Item(), status=404)
    assert "404 is not a valid success status code" in str(excinfo.value)


def test_constructor_accepts_success_status():
    assert SuccessResponse(data=Item(), status=204).status == 204


def test_package_exports_pagination():
    import responder
    from responder.paginator import Pagination

    assert responder.Pagination is Pagination
    assert "Pagination" in responder.__all__
