import pytest

from fusionauth.core import ClientResponse, ResponseDecodeError, TransportError


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_2xx_is_successful(status):
    assert ClientResponse(method="GET", status=status).was_successful()


@pytest.mark.parametrize("status", [199, 300, 302, 400, 404, 500])
def test_other_statuses_are_not_successful(status):
    assert not ClientResponse(method="GET", status=status).was_successful()


def test_missing_status_is_not_successful():
    response = ClientResponse(method="GET", exception=TransportError("refused"))
    assert not response.was_successful()
    assert isinstance(response.transport_error, TransportError)
    assert response.decode_error is None


def test_decode_error_makes_2xx_unsuccessful():
    error = ResponseDecodeError("bad body", content=b"x", status=200)
    response = ClientResponse(method="GET", status=200, exception=error)
    assert not response.was_successful()
    assert response.decode_error is error
    assert response.transport_error is None


def test_response_is_immutable():
    response = ClientResponse(method="GET", status=200)
    with pytest.raises(AttributeError):
        response.status = 500
