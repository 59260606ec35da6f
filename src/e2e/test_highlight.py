from smartedit_web.highlight import merge_spans, render_highlight


def test_merge_spans_joins_overlaps():
    assert merge_spans([0, 1, 2], 2) == [(0, 4)]
    assert merge_spans([0, 7, 15], 3) == [(0, 3), (7, 10), (15, 18)]
    assert merge_spans([0, 3], 3) == [(0, 3), (3, 6)]
    assert merge_spans([1], 0) == []


def test_no_matches_is_escaped_text():
    assert str(render_highlight("a<b & c", [], 1)) == "a&lt;b &amp; c"


def test_marks_and_current():
    html = str(render_highlight("banana bandana band", [0, 7, 15], 3, current=1))
    assert html.startswith('<mark class="match">ban</mark>ana ')
    assert '<mark class="match current">ban</mark>dana' in html
    assert html.endswith('<mark class="match">ban</mark>d')


def test_marked_text_is_escaped():
    html = str(render_highlight("<b>ban</b>", [3], 3))
    assert html == '&lt;b&gt;<mark class="match">ban</mark>&lt;/b&gt;'


def test_touching_matches_stay_separate():
    html = str(render_highlight("abab", [0, 2], 2, current=1))
    assert html == '<mark class="match">ab</mark><mark class="match current">ab</mark>'
