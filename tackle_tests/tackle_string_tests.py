import suite
from tackle import is_letter, truncate, extract_words, camel_case, pascal_case, title_case

test = suite.test
assert_that = suite.assert_that


@test("truncate shortens long text with an ending")
def test_truncate():
    assert_that(truncate('Hello world', 8) == 'Hello...', "truncate failed")
    assert_that(truncate('Hello', 8) == 'Hello', "short text should be untouched")
    assert_that(truncate('Hello world', 6, '~') == 'Hello~', "custom ending failed")


@test("extract_words splits on punctuation and keeps unicode")
def test_extract_words():
    result = extract_words('Hell_o "WĄRLD", [with-unicode]!')
    assert_that(result == ['Hell_o', 'WĄRLD', 'with', 'unicode'], f"extract_words failed: {result}")
    assert_that(extract_words('  ') == [], "blank text should give no words")


@test("camel_case joins delimited words")
def test_camel_case():
    assert_that(camel_case('--foo bar') == 'fooBar', "camel_case failed")
    assert_that(camel_case('--foo1bar') == 'foo1Bar', "letter after number should be upper")
    assert_that(camel_case('NODE_ENV') == 'nodeEnv', "upper snake case failed")


@test("pascal_case capitalises the first letter too")
def test_pascal_case():
    assert_that(pascal_case('--foo bar') == 'FooBar', "pascal_case failed")
    assert_that(pascal_case('--foo1bar') == 'Foo1Bar', "letter after number should be upper")
    assert_that(pascal_case('') == '', "empty text failed")


@test("title_case capitalises every word start")
def test_title_case():
    result = title_case('hello-world FTW,abc999t t')
    assert_that(result == 'Hello-World Ftw,Abc999T T', f"title_case failed: {result}")


@test("is_letter recognises cased characters")
def test_is_letter():
    assert_that(is_letter('a') and is_letter('Ž'), "letters failed")
    assert_that(not is_letter('-') and not is_letter('9'), "non-letters passed")


if __name__ == "__main__":
    suite.run(title="tackle string test")
