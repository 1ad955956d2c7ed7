import pytest

from functions_request import (
    CodeLanguage,
    EmptyArgs,
    EmptySecrets,
    EmptySource,
    Location,
    Request,
    RequestBuilder,
    add_args,
    add_remote_secrets,
    initialize_inline_javascript,
    initialize_request,
)


def test_new_request_is_empty() -> None:
    request = Request()
    assert not request.is_initialized()
    assert request.code_location == Location.INLINE
    assert request.secrets_location == Location.INLINE
    assert request.language == CodeLanguage.JAVASCRIPT
    assert request.source == ''
    assert request.secrets == b''
    assert request.args == []


def test_args_are_not_shared() -> None:
    first, second = Request(), Request()
    add_args(first, ['a'])
    assert second.args == []


def test_initialize_request() -> None:
    request = Request()
    initialize_request(request, Location.REMOTE, CodeLanguage.JAVASCRIPT, 'https://example.com/job.js')
    assert request.is_initialized()
    assert request.code_location == Location.REMOTE
    assert request.source == 'https://example.com/job.js'


def test_initialize_inline_javascript() -> None:
    request = Request(code_location=Location.REMOTE)
    initialize_inline_javascript(request, 'return 1')
    assert request.code_location == Location.INLINE
    assert request.language == CodeLanguage.JAVASCRIPT
    assert request.source == 'return 1'


def test_empty_source_leaves_request_unchanged() -> None:
    request = Request()
    initialize_request(request, Location.REMOTE, CodeLanguage.JAVASCRIPT, 'https://example.com/a.js')
    with pytest.raises(EmptySource):
        initialize_request(request, Location.INLINE, CodeLanguage.JAVASCRIPT, '')
    with pytest.raises(EmptySource):
        initialize_inline_javascript(request, '')
    assert request.code_location == Location.REMOTE
    assert request.source == 'https://example.com/a.js'


def test_reinitialize_keeps_secrets_and_args() -> None:
    request = Request()
    initialize_inline_javascript(request, 'return 1')
    add_remote_secrets(request, b'\x01\x02')
    add_args(request, ['x'])
    initialize_request(request, Location.REMOTE, CodeLanguage.JAVASCRIPT, 'https://example.com/b.js')
    assert request.code_location == Location.REMOTE
    assert request.source == 'https://example.com/b.js'
    assert request.secrets == b'\x01\x02'
    assert request.secrets_location == Location.REMOTE
    assert request.args == ['x']


def test_add_remote_secrets() -> None:
    request = Request()
    add_remote_secrets(request, bytearray(b'\xaa\xbb'))
    assert request.secrets_location == Location.REMOTE
    assert request.secrets == b'\xaa\xbb'
    assert isinstance(request.secrets, bytes)
    add_remote_secrets(request, b'\xcc')
    assert request.secrets == b'\xcc'


def test_empty_secrets_leaves_request_unchanged() -> None:
    request = Request()
    with pytest.raises(EmptySecrets):
        add_remote_secrets(request, b'')
    assert request.secrets == b''
    assert request.secrets_location == Location.INLINE

    add_remote_secrets(request, b'\x01')
    with pytest.raises(EmptySecrets):
        add_remote_secrets(request, b'')
    assert request.secrets == b'\x01'


def test_add_args_keeps_order_and_copies() -> None:
    request = Request()
    args = ['ETH', 'USD', '']
    add_args(request, args)
    args.append('BTC')
    assert request.args == ['ETH', 'USD', '']

    add_args(request, (arg for arg in ['b', 'a']))
    assert request.args == ['b', 'a']


def test_empty_args_leaves_request_unchanged() -> None:
    request = Request()
    add_args(request, ['a'])
    with pytest.raises(EmptyArgs):
        add_args(request, [])
    assert request.args == ['a']


@pytest.mark.parametrize('args', ['abc', ['a', 1], [b'a']])
def test_add_args_wrong_type(args: object) -> None:
    request = Request()
    with pytest.raises(TypeError):
        add_args(request, args)  # type: ignore[arg-type]
    assert request.args == []


def test_builder_chains() -> None:
    builder = RequestBuilder()
    result = (
        builder
        .initialize_inline_javascript('return 1')
        .add_args(['a', 'b'])
        .add_remote_secrets(b'\x01')
    )
    assert result is builder
    assert builder.request.source == 'return 1'
    assert builder.request.args == ['a', 'b']
    assert builder.request.secrets == b'\x01'


def test_builder_wraps_given_request() -> None:
    request = Request()
    builder = RequestBuilder(request)
    builder.initialize_request(Location.REMOTE, CodeLanguage.JAVASCRIPT, 'https://example.com/c.js')
    assert builder.request is request
    assert request.code_location == Location.REMOTE


def test_builder_errors_propagate() -> None:
    builder = RequestBuilder()
    with pytest.raises(EmptySource):
        builder.initialize_inline_javascript('')
    with pytest.raises(EmptyArgs):
        builder.add_args([])
    with pytest.raises(EmptySecrets):
        builder.add_remote_secrets(b'')
    assert builder.request == Request()
