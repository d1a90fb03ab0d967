import pytest

import merlin


class Recorder:
    def __init__(self):
        self.called = []

    def handler(self, name, resp=None, body=None):
        def handle():
            self.called.append(name)
            if resp is not None:
                resp.send(body)

        return handle


@pytest.fixture()
def recorder():
    return Recorder()


def _text_html_json(recorder):
    return {
        'text/plain': recorder.handler('text'),
        'text/html': recorder.handler('html'),
        'application/json': recorder.handler('json'),
    }


class TestFormat:
    @pytest.mark.parametrize(
        'accept,expected,content_type',
        [
            ('text/html', 'html', 'text/html'),
            ('application/json', 'json', 'application/json'),
            ('text/html;q=0.5, application/json', 'json', 'application/json'),
            ('text/*', 'text', 'text/plain'),
            ('*/*', 'text', 'text/plain'),
            ('application/*, text/html;q=0.1', 'json', 'application/json'),
            ('image/png, text/html;q=0.9', 'html', 'text/html'),
        ],
    )
    def test_accept(self, util, recorder, accept, expected, content_type):
        resp = util.create_extended(headers={'Accept': accept})

        assert resp.format(_text_html_json(recorder)) is resp

        assert recorder.called == [expected]
        assert resp.get('Content-Type') == content_type
        assert resp.get('Vary') == 'Accept'

    def test_no_accept_picks_first(self, resp, recorder):
        resp.format(_text_html_json(recorder))

        assert recorder.called == ['text']
        assert resp.get('Content-Type') == 'text/plain'
        assert resp.get('Vary') == 'Accept'

    @pytest.mark.parametrize(
        'accept,expected,content_type',
        [
            ('text/html', 'html', 'text/html'),
            ('application/json', 'json', 'application/json'),
            ('text/plain', 'text', 'text/plain'),
            ('application/xml', 'xml', 'application/xml'),
        ],
    )
    def test_shorthand_keys(self, util, recorder, accept, expected, content_type):
        resp = util.create_extended(headers={'Accept': accept})
        resp.format(
            {
                'text': recorder.handler('text'),
                'html': recorder.handler('html'),
                'json': recorder.handler('json'),
                'xml': recorder.handler('xml'),
            }
        )

        assert recorder.called == [expected]
        assert resp.get('Content-Type') == content_type

    def test_handler_sends(self, util):
        resp = util.create_extended(headers={'Accept': 'text/html'})
        resp.format(
            {
                'text/plain': lambda: resp.send('hey'),
                'text/html': lambda: resp.send('<p>hey</p>'),
                'json': lambda: resp.send({'message': 'hey'}),
            }
        )

        assert resp.complete
        assert resp.data == b'<p>hey</p>'
        assert resp.get('Content-Type') == 'text/html'

    def test_handler_may_override_type(self, util):
        resp = util.create_extended(headers={'Accept': 'application/json'})
        resp.format({'json': lambda: resp.type(merlin.MEDIA_JSON_UTF8).send('{}')})

        assert resp.get('Content-Type') == 'application/json; charset=utf-8'

    def test_format_map(self, util, recorder):
        resp = util.create_extended(headers={'Accept': 'text/html'})
        handlers = merlin.FormatMap(
            {'json': recorder.handler('json'), 'html': recorder.handler('html')}
        )

        resp.format(handlers)

        assert recorder.called == ['html']
        assert handlers.types == ['application/json', 'text/html']


class TestFormatDefault:
    def test_default_kwarg(self, util, recorder):
        resp = util.create_extended(headers={'Accept': 'image/png'})
        resp.format(_text_html_json(recorder), default=recorder.handler('default'))

        assert recorder.called == ['default']
        assert resp.get('Content-Type') is None
        assert resp.get('Vary') == 'Accept'

    def test_default_key(self, util, recorder):
        resp = util.create_extended(headers={'Accept': 'image/png'})

        handlers = _text_html_json(recorder)
        handlers['default'] = recorder.handler('default')
        resp.format(handlers)

        assert recorder.called == ['default']

    def test_default_key_is_not_a_candidate(self, resp, recorder):
        resp.format(
            {
                'default': recorder.handler('default'),
                'json': recorder.handler('json'),
            }
        )

        assert recorder.called == ['json']

    def test_default_kwarg_takes_precedence(self, util, recorder):
        resp = util.create_extended(headers={'Accept': 'image/png'})
        resp.format(
            {
                'json': recorder.handler('json'),
                'default': recorder.handler('default-key'),
            },
            default=recorder.handler('default-kwarg'),
        )

        assert recorder.called == ['default-kwarg']

    def test_format_map_default(self, util, recorder):
        resp = util.create_extended(headers={'Accept': 'image/png'})
        resp.format(
            merlin.FormatMap(
                {'json': recorder.handler('json')},
                default=recorder.handler('default'),
            )
        )

        assert recorder.called == ['default']

    @pytest.mark.parametrize('accept', ['foo', 'text/html;q=2', 'text/html;q=high'])
    def test_malformed_accept(self, util, recorder, accept):
        resp = util.create_extended(headers={'Accept': accept})
        resp.format(_text_html_json(recorder), default=recorder.handler('default'))

        assert recorder.called == ['default']

    def test_default_logged(self, util, recorder, merlin_logs):
        resp = util.create_extended(headers={'Accept': 'image/png'})
        resp.format({'json': recorder.handler('json')}, default=lambda: None)

        assert 'No acceptable format' in merlin_logs.text


class TestNotAcceptable:
    def test_not_acceptable(self, util, recorder):
        resp = util.create_extended(headers={'Accept': 'image/png'})

        with pytest.raises(merlin.HTTPNotAcceptable) as exc_info:
            resp.format(
                {'text': recorder.handler('text'), 'html': recorder.handler('html')}
            )

        error = exc_info.value
        assert recorder.called == []
        assert error.status_code == 406
        assert error.title == '406 Not Acceptable'
        assert error.types == ['text/plain', 'text/html']
        assert error.description == 'Supported media types: text/plain, text/html'
        assert error.to_dict() == {
            'title': '406 Not Acceptable',
            'description': 'Supported media types: text/plain, text/html',
            'types': ['text/plain', 'text/html'],
        }

        assert resp.get('Vary') == 'Accept'
        assert resp.get('Content-Type') is None
        assert not resp.complete

    def test_is_http_error(self, util):
        resp = util.create_extended(headers={'Accept': 'image/png'})

        with pytest.raises(merlin.HTTPError):
            resp.format({'json': lambda: None})

    def test_no_handlers(self, resp):
        with pytest.raises(merlin.HTTPNotAcceptable) as exc_info:
            resp.format({})

        assert exc_info.value.types == []
        assert exc_info.value.description is None

    def test_response_still_usable(self, util):
        resp = util.create_extended(headers={'Accept': 'image/png'})

        try:
            resp.format({'json': lambda: None})
        except merlin.HTTPNotAcceptable as ex:
            resp.status(ex.status_code).send(', '.join(ex.types))

        assert resp.status_code == 406
        assert resp.data == b'application/json'
