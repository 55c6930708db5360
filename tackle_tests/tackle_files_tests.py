import suite
from tackle import format_bytes, parse_size, get_file_parts

test = suite.test
assert_that = suite.assert_that


# --- format_bytes ---

@test("format_bytes handles zero and negatives")
def test_format_bytes_non_positive():
    assert_that(format_bytes(0) == '0 Bytes', "zero failed")
    assert_that(format_bytes(-158) == '0 Bytes', "negative failed")


@test("format_bytes picks the unit and rounds")
def test_format_bytes_units():
    assert_that(format_bytes(1688, 1) == '1.6 KB', f"decimals failed: {format_bytes(1688, 1)}")
    assert_that(format_bytes(1648 * 9884) == '15.53 MB', f"MB failed: {format_bytes(1648 * 9884)}")
    assert_that(format_bytes(512) == '512 Bytes', "bytes failed")
    assert_that(format_bytes(1536) == '1.5 KB', "trailing zero should be trimmed")


@test("format_bytes keeps fractional sizes in bytes")
def test_format_bytes_fraction():
    assert_that(format_bytes(0.5) == '0.5 Bytes', f"fraction failed: {format_bytes(0.5)}")
    assert_that(format_bytes(0.001, 3) == '0.001 Bytes', f"small fraction failed: {format_bytes(0.001, 3)}")


# --- parse_size ---

@test("parse_size reads sizes back")
def test_parse_size():
    assert_that(parse_size('10 Bytes') == 10, "bytes failed")
    assert_that(parse_size('1.6 KB') == 1638.4, f"KB failed: {parse_size('1.6 KB')}")
    assert_that(parse_size('15.53 MB') == 16284385.28, f"MB failed: {parse_size('15.53 MB')}")
    assert_that(parse_size('2 kb') == 2048, "units should be case-insensitive")


@test("parse_size returns 0 for unreadable text")
def test_parse_size_invalid():
    assert_that(parse_size('zero bytes') == 0, "words should give 0")
    assert_that(parse_size('10 parsecs') == 0, "unknown unit should give 0")


# --- get_file_parts ---

@test("get_file_parts splits names and paths")
def test_get_file_parts():
    cases = {
        'myfile.txt': ('myfile', '.txt'),
        'myfile': ('myfile', ''),
        '.data': ('.data', ''),
        '/my.home/myfile.txt': ('/my.home/myfile', '.txt'),
        '/my.home/myfile': ('/my.home/myfile', ''),
        '/my.home/.data': ('/my.home/.data', ''),
        'archive.tar.gz': ('archive.tar', '.gz'),
    }
    for path, expected in cases.items():
        assert_that(get_file_parts(path) == expected, f"{path} gave {get_file_parts(path)}")


if __name__ == "__main__":
    suite.run(title="tackle files test")
