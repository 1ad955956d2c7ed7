import pytest

from functions_request.access import parse_address, parse_senders

ADDR_1 = '0x' + '11' * 20
ADDR_2 = '0x' + 'ab' * 20


@pytest.mark.parametrize('text', [ADDR_1, ADDR_1[2:], '  ' + ADDR_1 + '\n', '0X' + '11' * 20])
def test_parse_address(text: str) -> None:
    assert parse_address(text) == b'\x11' * 20


@pytest.mark.parametrize('text', ['', '0x', '0x' + '11' * 19, '0x' + '11' * 21, '0x' + 'zz' * 20, '0x1'])
def test_parse_invalid_address(text: str) -> None:
    with pytest.raises(ValueError):
        parse_address(text)


def test_parse_senders() -> None:
    content = '\n'.join([
        '# first line is a comment',
        ADDR_2,
        '',
        '   ',
        ADDR_1 + '   # trailing comment',
        ADDR_2.upper().replace('0X', '0x'),
    ])
    assert parse_senders(content) == [b'\xab' * 20, b'\x11' * 20]


def test_parse_empty_file() -> None:
    assert parse_senders('') == []
    assert parse_senders('# nothing here\n\n') == []


def test_parse_with_header() -> None:
    content = 'functions-senders\n' + ADDR_1 + '\n'
    assert parse_senders(content, header='functions-senders') == [b'\x11' * 20]


@pytest.mark.parametrize('content', ['', ADDR_1 + '\n', 'other-header\n' + ADDR_1])
def test_parse_missing_header(content: str) -> None:
    with pytest.raises(ValueError):
        parse_senders(content, header='functions-senders')


def test_parse_invalid_line() -> None:
    with pytest.raises(ValueError):
        parse_senders(ADDR_1 + '\nnot-an-address\n')
