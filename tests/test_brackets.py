from hypothesis import given
from hypothesis import strategies as st

from dsakit.brackets import check_brackets


def _balanced():
    leaf = st.text(alphabet="ab;", max_size=3)
    return st.recursive(
        leaf,
        lambda inner: st.one_of(
            st.tuples(inner, inner).map("".join),
            st.tuples(st.sampled_from(["()", "[]", "{}"]), inner).map(
                lambda pair: pair[0][0] + pair[1] + pair[0][1]
            ),
        ),
        max_leaves=10,
    )


def test_balanced_text():
    assert check_brackets("([](){([])})") is None
    assert check_brackets("foo(bar);") is None
    assert check_brackets("") is None


def test_unmatched_closer():
    text = "()[]}"
    assert check_brackets(text) == text.index("}") + 1


def test_mismatched_closer():
    text = "{{[()]]"
    assert check_brackets(text) == len(text)
    text = "foo(bar[i);"
    assert check_brackets(text) == text.index(")") + 1


def test_unclosed_opener_reports_earliest():
    text = "a{b(c)"
    assert check_brackets(text) == text.index("{") + 1
    assert check_brackets("{") == 1


@given(_balanced())
def test_generated_balanced(text):
    assert check_brackets(text) is None


@given(_balanced(), st.sampled_from(")]}"))
def test_extra_closer_reported_at_end(text, closer):
    assert check_brackets(text + closer) == len(text) + 1


@given(_balanced(), st.sampled_from("([{"))
def test_leading_opener_reported_first(text, opener):
    assert check_brackets(opener + text) == 1