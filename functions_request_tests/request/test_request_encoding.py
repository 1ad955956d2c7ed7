import copy

import cbor2
import pytest

from functions_request import (
    CodeLanguage,
    EmptySource,
    Location,
    MapFraming,
    NoInlineSecrets,
    Request,
    RequestBuilder,
    RequestTooLarge,
    encode_request,
)
from functions_request.conf.settings import FunctionsSettings
from functions_request_tests import unittest


class RequestEncodingTest(unittest.TestCase):
    def _builder(self, **settings_kwargs: object) -> RequestBuilder:
        settings = FunctionsSettings(**settings_kwargs) if settings_kwargs else None
        return RequestBuilder(settings=settings)

    def test_source_only(self) -> None:
        encoded = self._builder().initialize_inline_javascript('return 1').encode()
        self.assertEqual(encoded, b'\xbf\x6ccodeLocation\x00\x66source\x68return 1\xff')
        self.assertEqual(cbor2.loads(encoded), {'codeLocation': 0, 'source': 'return 1'})

    def test_remote_source(self) -> None:
        encoded = (
            self._builder()
            .initialize_request(Location.REMOTE, CodeLanguage.JAVASCRIPT, 'https://example.com/job.js')
            .encode()
        )
        self.assertEqual(cbor2.loads(encoded), {'codeLocation': 1, 'source': 'https://example.com/job.js'})

    def test_args(self) -> None:
        encoded = self._builder().initialize_inline_javascript('return 1').add_args(['ETH', 'USD']).encode()
        decoded = cbor2.loads(encoded)
        self.assertEqual(list(decoded.keys()), ['codeLocation', 'source', 'args'])
        self.assertEqual(decoded['args'], ['ETH', 'USD'])
        # args are written as an indefinite-length array
        self.assertIn(b'\x64args\x9f\x63ETH\x63USD\xff', encoded)

    def test_secrets(self) -> None:
        encoded = self._builder().initialize_inline_javascript('return 1').add_remote_secrets(b'\xde\xad').encode()
        self.assertEqual(
            encoded,
            b'\xbf\x6ccodeLocation\x00\x66source\x68return 1'
            b'\x6fsecretsLocation\x01\x67secrets\x42\xde\xad\xff'
        )

    def test_all_fields_in_order(self) -> None:
        secrets = self.random_bytes(40)
        args = [self.random_text(self.rng.randint(0, 30)) for _ in range(5)]
        source = self.random_text(100)
        # the order of the builder calls does not change the encoded order
        encoded = (
            self._builder()
            .add_remote_secrets(secrets)
            .add_args(args)
            .initialize_inline_javascript(source)
            .encode()
        )
        decoded = cbor2.loads(encoded)
        self.assertEqual(list(decoded.keys()), ['codeLocation', 'source', 'args', 'secretsLocation', 'secrets'])
        self.assertEqual(decoded, {
            'codeLocation': 0,
            'source': source,
            'args': args,
            'secretsLocation': 1,
            'secrets': secrets,
        })

    def test_encoding_is_repeatable(self) -> None:
        builder = self._builder().initialize_inline_javascript('return 1').add_args(['a'])
        request_before = copy.deepcopy(builder.request)
        first = builder.encode()
        second = builder.encode()
        self.assertEqual(first, second)
        self.assertEqual(builder.request, request_before)

    def test_large_source_grows_buffer(self) -> None:
        source = 'x' * 1000
        encoded = self._builder().initialize_inline_javascript(source).encode()
        self.assertGreater(len(encoded), 256)
        self.assertEqual(cbor2.loads(encoded)['source'], source)

    def test_small_initial_capacity(self) -> None:
        args = [self.random_text(50) for _ in range(20)]
        encoded = (
            self._builder(BUFFER_INITIAL_CAPACITY=1)
            .initialize_inline_javascript('return 1')
            .add_args(args)
            .encode()
        )
        self.assertEqual(cbor2.loads(encoded)['args'], args)

    def test_uninitialized_request(self) -> None:
        with self.assertRaises(EmptySource):
            self._builder().encode()
        with self.assertRaises(EmptySource):
            self._builder().add_args(['a']).add_remote_secrets(b'\x01').encode()

    def test_inline_secrets_are_rejected(self) -> None:
        request = Request(source='return 1', secrets=b'\x01')
        with self.assertRaises(NoInlineSecrets):
            encode_request(request, settings=self._settings)

    def test_secrets_location_without_secrets_is_not_encoded(self) -> None:
        request = Request(source='return 1', secrets_location=Location.REMOTE)
        decoded = cbor2.loads(encode_request(request, settings=self._settings))
        self.assertEqual(decoded, {'codeLocation': 0, 'source': 'return 1'})

    def test_language_is_not_encoded(self) -> None:
        encoded = self._builder().initialize_inline_javascript('return 1').encode()
        self.assertNotIn(b'language', encoded)

    def test_global_settings_are_used_by_default(self) -> None:
        request = Request(source='return 1')
        self.assertEqual(self._settings.ENVIRONMENT_NAME, 'unittests')
        self.assertEqual(encode_request(request), encode_request(request, settings=self._settings))

    def test_no_map_framing(self) -> None:
        framed = self._builder().initialize_inline_javascript('return 1').add_args(['a']).encode()
        bare = (
            self._builder(REQUEST_MAP_FRAMING=MapFraming.NONE)
            .initialize_inline_javascript('return 1')
            .add_args(['a'])
            .encode()
        )
        self.assertEqual(b'\xbf' + bare + b'\xff', framed)
        self.assertEqual(cbor2.loads(b'\xbf' + bare + b'\xff'), cbor2.loads(framed))

    def test_max_request_bytes(self) -> None:
        exact_size = len(self._builder().initialize_inline_javascript('return 1').encode())
        encoded = self._builder(MAX_REQUEST_BYTES=exact_size).initialize_inline_javascript('return 1').encode()
        self.assertEqual(len(encoded), exact_size)
        with self.assertRaises(RequestTooLarge):
            self._builder(MAX_REQUEST_BYTES=exact_size - 1).initialize_inline_javascript('return 1').encode()


@pytest.mark.parametrize('source', ['a', 'π', 'x' * 23, 'x' * 24, 'y' * 255, 'y' * 256, 'z' * 65536])
def test_source_sizes(source: str) -> None:
    request = Request(source=source)
    assert cbor2.loads(encode_request(request)) == {'codeLocation': 0, 'source': source}
