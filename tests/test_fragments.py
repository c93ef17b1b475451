from css_selector_builder import FragmentKind, SelectorFragment

def test_ranks_follow_css_order():
    ranks = [kind.rank for kind in FragmentKind]
    assert ranks == [1, 2, 3, 4, 5, 6]

def test_fragment_formatting():
    cases = [
        (FragmentKind.ELEMENT, "div", "div"),
        (FragmentKind.ID, "main", "#main"),
        (FragmentKind.CLASS, "container", ".container"),
        (FragmentKind.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
        (FragmentKind.PSEUDO_CLASS, "focus", ":focus"),
        (FragmentKind.PSEUDO_ELEMENT, "after", "::after"),
    ]

    for kind, value, expected in cases:
        fragment = SelectorFragment.from_value(kind, value)
        assert fragment.text == expected
        assert fragment.rank == kind.rank
