import copy
import pickle

import pytest

from funcbox import PLACEHOLDER, partial


def stringify(*args):
    return ",".join(map(str, args))


def power(a, b):
    return a ** b


def test_placeholder_singleton():
    assert repr(PLACEHOLDER) == "PLACEHOLDER"
    assert type(PLACEHOLDER)() is PLACEHOLDER
    assert copy.copy(PLACEHOLDER) is PLACEHOLDER
    assert copy.deepcopy([PLACEHOLDER])[0] is PLACEHOLDER
    assert pickle.loads(pickle.dumps(PLACEHOLDER)) is PLACEHOLDER


class TestPartial:
    @pytest.mark.parametrize(
        "bound, given, expect",
        [
            ((), (), ""),
            ((1, 2), (), "1,2"),
            ((1, PLACEHOLDER), (2,), "1,2"),
            ((1, 2), (3, 4), "1,2,3,4"),
            ((1, PLACEHOLDER, 3), (2, 4), "1,2,3,4"),
            (
                (1, PLACEHOLDER, 3, PLACEHOLDER, 5),
                (2, 4, 6),
                "1,2,3,4,5,6",
            ),
            ((PLACEHOLDER, PLACEHOLDER), ("a", "b"), "a,b"),
        ],
    )
    def test_positional(self, bound, given, expect):
        assert partial(stringify, *bound)(*given) == expect

    def test_bound_keyword(self):
        assert partial(power, b=10)(2) == 1024

    def test_given_keyword(self):
        assert partial(power, b=10)(a=2) == 1024

    def test_keyword_override(self):
        assert partial(power, b=10)(2, b=3) == 8

    def test_placeholder_with_keyword(self):
        assert partial(power, PLACEHOLDER, b=3)(2) == 8

    def test_missing_placeholder_argument(self):
        with pytest.raises(TypeError, match="placeholder at position 1"):
            partial(stringify, 1, PLACEHOLDER)()

    def test_duplicate_argument(self):
        with pytest.raises(TypeError):
            partial(power, 2, b=10)(a=3)

    def test_too_many_arguments(self):
        with pytest.raises(TypeError):
            partial(power, 2)(3, 4)

    def test_keyword_placeholder(self):
        def show(a, b="unset"):
            return a, b

        with pytest.raises(TypeError, match="keyword argument 'b'"):
            partial(show, b=PLACEHOLDER)

    def test_not_callable(self):
        with pytest.raises(TypeError, match="callable"):
            partial(5)

    def test_reusable(self, mocker):
        func = mocker.Mock()
        bound = partial(func, PLACEHOLDER, "x", key="y")
        bound(1)
        bound(2, 3)
        assert func.call_args_list == [
            mocker.call(1, "x", key="y"),
            mocker.call(2, "x", 3, key="y"),
        ]

    def test_attributes(self):
        bound = partial(power, PLACEHOLDER, b=1)
        assert bound.func is power
        assert bound.args == (PLACEHOLDER,)
        assert bound.keywords == {"b": 1}

    def test_repr(self):
        assert repr(partial(power, PLACEHOLDER, b=1)) == (
            "partial({!r}, PLACEHOLDER, b=1)".format(power)
        )
