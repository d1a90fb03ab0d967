import http
import json

import pytest

import merlin


class TestHTTPError:
    @pytest.mark.parametrize(
        'status,status_code,title',
        [
            (400, 400, '400 Bad Request'),
            ('503 Service Unavailable', 503, '503 Service Unavailable'),
            (http.HTTPStatus.GONE, 410, '410 Gone'),
        ],
    )
    def test_status(self, status, status_code, title):
        error = merlin.HTTPError(status)

        assert error.status == status
        assert error.status_code == status_code
        assert error.title == title
        assert error.description is None
        assert error.headers is None

    def test_title_and_description(self):
        error = merlin.HTTPError(
            404,
            title='Missing',
            description='Nothing to see here',
            headers={'X-A': 'b'},
        )

        assert error.to_dict() == {
            'title': 'Missing',
            'description': 'Nothing to see here',
        }
        assert error.headers == {'X-A': 'b'}

    def test_to_json(self):
        error = merlin.HTTPError(400, description='Ünïcode')

        assert json.loads(error.to_json()) == {
            'title': '400 Bad Request',
            'description': 'Ünïcode',
        }
        assert 'Ünïcode'.encode() in error.to_json()

    def test_repr(self):
        error = merlin.HTTPError(400)

        assert repr(error) == '<HTTPError: 400>'
        assert str(error) == '<HTTPError: 400>'

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            merlin.HTTPError(400, 'Title')


class TestHTTPNotAcceptable:
    def test_defaults(self):
        error = merlin.HTTPNotAcceptable()

        assert error.status_code == 406
        assert error.title == '406 Not Acceptable'
        assert error.types == []
        assert error.description is None
        assert error.to_dict() == {'title': '406 Not Acceptable', 'types': []}

    def test_types(self):
        error = merlin.HTTPNotAcceptable(types=('application/json', 'text/html'))

        assert error.types == ['application/json', 'text/html']
        assert error.description == (
            'Supported media types: application/json, text/html'
        )

    def test_custom_description(self):
        error = merlin.HTTPNotAcceptable(types=['text/html'], description='Nope')

        assert error.description == 'Nope'
        assert json.loads(error.to_json()) == {
            'title': '406 Not Acceptable',
            'description': 'Nope',
            'types': ['text/html'],
        }

    def test_repr(self):
        assert repr(merlin.HTTPNotAcceptable()) == '<HTTPNotAcceptable: 406>'


class TestErrorHierarchy:
    def test_invalid_media_range(self):
        assert issubclass(merlin.InvalidMediaRange, merlin.InvalidMediaType)
        assert issubclass(merlin.InvalidMediaType, ValueError)

    def test_response_complete(self):
        assert issubclass(merlin.ResponseCompleteError, RuntimeError)
